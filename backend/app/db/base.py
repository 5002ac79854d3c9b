from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.organization import Organization  # noqa: F401
from backend.app.models.opportunity import Opportunity  # noqa: F401
from backend.app.models.student import Student  # noqa: F401
from backend.app.models.student_interest import StudentInterest  # noqa: F401
from backend.app.models.student_preference import StudentOpportunityPreference  # noqa: F401
from backend.app.models.email_verification import EmailVerificationCode  # noqa: F401
