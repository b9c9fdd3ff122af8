"""
Career profile API tests.
"""

from careerion.services.mongo_service import is_profile_complete
from tests.conftest import auth_header

COMPLETE_PROFILE = {
    "educationLevel": "Bachelor's",
    "fieldOfStudy": "Computer Science",
    "institution": "State University",
    "currentStatus": "Student",
    "skills": ["Python", "SQL"],
    "interests": ["Data"],
    "careerGoals": "Become a data engineer",
}


def test_requires_token(client):
    assert client.get("/api/user/profile").status_code == 401
    assert client.post("/api/user/profile", json={}).status_code == 401


def test_new_user_has_empty_profile(client, user_token):
    response = client.get("/api/user/profile", headers=auth_header(user_token))

    assert response.status_code == 200
    assert response.json() == {"profile": {}, "profileComplete": False}


def test_update_keeps_only_allowed_fields(client, db, user_token):
    response = client.post("/api/user/profile", headers=auth_header(user_token), json={
        "educationLevel": "Master's",
        "willingToRelocate": True,
        "role": "admin",
        "password": "hijack",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Profile updated"
    assert body["profile"] == {"educationLevel": "Master's", "willingToRelocate": True}
    stored = db.users.find_one({"email": "user@test.com"})
    assert stored["role"] == "user"
    assert "hijack" not in stored["password"]


def test_update_replaces_previous_profile(client, user_token):
    headers = auth_header(user_token)
    client.post("/api/user/profile", headers=headers, json={"educationLevel": "Master's"})
    client.post("/api/user/profile", headers=headers, json={"careerGoals": "Teach"})

    profile = client.get("/api/user/profile", headers=headers).json()["profile"]

    assert profile == {"careerGoals": "Teach"}


def test_complete_profile_is_flagged(client, user_token):
    headers = auth_header(user_token)

    response = client.post("/api/user/profile", headers=headers, json=COMPLETE_PROFILE)

    assert response.json()["profileComplete"] is True
    assert client.get("/api/user/profile", headers=headers).json()["profileComplete"] is True


def test_profile_completeness_rule():
    assert is_profile_complete(COMPLETE_PROFILE)
    assert not is_profile_complete({**COMPLETE_PROFILE, "skills": []})
    assert not is_profile_complete({**COMPLETE_PROFILE, "careerGoals": ""})
    assert not is_profile_complete({})
    assert not is_profile_complete(None)
