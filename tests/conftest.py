import pytest

from services.garden_planner.engine import QuestionnaireEngine
from services.garden_planner.session import QuestionnaireSession


@pytest.fixture(scope="session")
def engine():
    """Provides a QuestionnaireEngine loaded with the built-in question definitions."""
    return QuestionnaireEngine()


@pytest.fixture
def session(engine):
    """Fresh questionnaire session for each test."""
    return QuestionnaireSession(engine)


@pytest.fixture
def full_answers():
    """A complete answer set for a food-growing, hosting household."""
    return {
        "gardenFeeling": ["energizing", "productive"],
        "gardenUsage": ["hosting", "growing_food"],
        "structurePreference": "modern",
        "sunExposure": "full_sun",
        "maintenance": 4,
        "colorPalette": ["sunny", "bold"],
        "plantTexture": ["grasses", "edibles"],
        "seasonalFocus": ["summer", "autumn"],
        "featureWishList": ["fire", "edible_station"],
        "edibleAmbition": "hero",
        "notes": "  We have a small dog.  ",
    }
