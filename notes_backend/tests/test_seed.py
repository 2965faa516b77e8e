from fastapi.testclient import TestClient

from notes_api.main import create_app
from notes_api.models import Note, User
from notes_api.seed import DEMO_EMAIL, DEMO_PASSWORD, SAMPLE_NOTES, seed_demo_data


def test_seed_creates_demo_user_once(db, settings):
    assert seed_demo_data(db, settings) is True
    assert seed_demo_data(db, settings) is False

    user = db.query(User).filter(User.email == DEMO_EMAIL).one()
    assert db.query(Note).filter(Note.user_id == user.id).count() == len(SAMPLE_NOTES)


def test_seed_on_startup_allows_demo_login(settings):
    app = create_app(settings.model_copy(update={"seed_demo_data": True}))

    with TestClient(app) as client:
        response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
        assert response.status_code == 200
        headers = {"Authorization": f"Bearer {response.json()['token']}"}
        notes = client.get("/api/notes", headers=headers).json()

    assert notes[0]["title"] == SAMPLE_NOTES[0][0]
    assert len(notes) == len(SAMPLE_NOTES)
