# tests/routers/test_profile_api.py
from fastapi.testclient import TestClient

from main import app
from services.assessment_engine.models import ChakraProfile
from soulsync.auth.session import create_session_token, get_current_user_id
from soulsync.core.config import get_session_settings
from soulsync.services import storage


def test_default_profile_for_new_user(client):
    response = client.get("/api/chakra-profile")
    assert response.status_code == 200
    body = response.json()
    assert body["isDefault"] is True
    assert body["userId"] == 1
    assert set(body["profile"].values()) == {5.0}
    assert body["insights"]["recommendedCoach"] == "integration"


def test_default_profile_is_not_persisted(client, run_db):
    client.get("/api/chakra-profile")
    assert run_db(lambda s: storage.load_profile(s, 1)) is None


def test_stored_profile_with_insights(client, run_db):
    profile = ChakraProfile.from_mapping({"throat": 1.5, "heart": 7.0})
    run_db(lambda s: storage.save_profile(s, 1, profile, "enhanced"))

    body = client.get("/api/chakra-profile").json()
    assert body["isDefault"] is False
    assert body["profile"]["throat"] == 1.5
    insights = body["insights"]
    assert insights["focusChakra"]["key"] == "throat"
    assert insights["focusChakra"]["direction"] == "underactive"
    assert insights["recommendedCoach"] == "higher_self"
    assert len(insights["coachingFocus"]) == 5


def test_chakra_reference_data(client):
    body = client.get("/api/chakras").json()
    assert [c["key"] for c in body] == ["root", "sacral", "solarPlexus", "heart", "throat", "thirdEye", "crown"]
    assert body[0]["details"]["sanskritName"] == "Muladhara"


def test_health_check(client):
    assert client.get("/api/health").json() == {"status": "ok"}


# --- Authentication ---

def test_missing_session_cookie_is_401(client):
    del app.dependency_overrides[get_current_user_id]
    response = client.get("/api/chakra-profile")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_valid_session_cookie_is_accepted(client):
    del app.dependency_overrides[get_current_user_id]
    cookie_name = get_session_settings().cookie_name
    authed = TestClient(app, cookies={cookie_name: create_session_token(2)})
    response = authed.get("/api/chakra-profile")
    assert response.status_code == 200
    assert response.json()["userId"] == 2


def test_tampered_session_cookie_is_401(client):
    del app.dependency_overrides[get_current_user_id]
    cookie_name = get_session_settings().cookie_name
    authed = TestClient(app, cookies={cookie_name: create_session_token(1) + "x"})
    assert authed.get("/api/chakra-profile").status_code == 401
