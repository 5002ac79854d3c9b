"""Fixed vocabularies shared by opportunities, organizations and students."""

from typing import Literal, get_args


Category = Literal[
    "stem_innovation",
    "arts_design",
    "humanities_social_sciences",
    "civic_engagement_leadership",
    "health_sports_sustainability",
    "business_entrepreneurship",
    "trades_technical",
]

OpportunityType = Literal[
    "program",
    "summer_opportunity",
    "internship",
    "mentorship",
    "volunteering",
]

# Students may also ask for types outside the fixed list
PreferenceType = Literal[
    "program",
    "summer_opportunity",
    "internship",
    "mentorship",
    "volunteering",
    "other",
]

LocationType = Literal["online", "in_person", "hybrid"]

GradeLevel = Literal["K", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12"]

OrganizationStatus = Literal["pending", "email_verified", "approved", "rejected"]

UserRole = Literal["student", "org", "admin"]

CostFilter = Literal["free", "paid", "stipend"]

CATEGORIES = get_args(Category)

US_STATES = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
    }
)
