"""User account API tests: registration, same-identity updates and favorites."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient

from movie_api.adapters.auth import hash_password, verify_password
from movie_api.core.config import get_settings
from movie_api.main import create_app
from movie_api.repositories.memory import DirectorRecord, GenreRecord

JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "MOVIE_API_JWT_SECRET",
        "MOVIE_API_JWT_EXPIRES_DAYS",
        "MOVIE_API_SEED_MOVIES",
        "MOVIE_API_PUBLIC_DIR",
        "MOVIE_API_ACCESS_LOG_PATH",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        for key in self._env_keys:
            os.environ.pop(key, None)
        os.environ["MOVIE_API_JWT_SECRET"] = JWT_SECRET
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class UserRegistrationApiTests(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.app = create_app()
        self.client = TestClient(self.app)
        self.store = self.app.state.store

    def test_register_stores_hash_and_returns_public_user(self) -> None:
        response = self.client.post(
            "/users",
            json={
                "username": "alice",
                "password": "correct-pw",
                "email": "alice@example.com",
                "birthday": "1990-04-01",
            },
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["username"], "alice")
        self.assertEqual(body["birthday"], "1990-04-01")
        self.assertEqual(body["favorites"], [])
        self.assertNotIn("password", body)
        self.assertNotIn("password_hash", body)

        record = self.store.find_user_by_username("alice")
        self.assertNotEqual(record.password_hash, "correct-pw")
        self.assertTrue(verify_password("correct-pw", record.password_hash))

    def test_registered_user_can_log_in(self) -> None:
        self.client.post(
            "/users",
            json={"username": "alice", "password": "correct-pw", "email": "alice@example.com"},
        )

        response = self.client.post("/login", json={"username": "alice", "password": "correct-pw"})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["token"])

    def test_invalid_registration_payload_returns_422_and_no_write(self) -> None:
        response = self.client.post(
            "/users",
            json={"username": "al!", "password": "", "email": "not-an-email"},
        )

        self.assertEqual(response.status_code, 422)
        body = response.json()
        self.assertEqual(body["code"], "VALIDATION_ERROR")
        failed_fields = {error["loc"][-1] for error in body["details"]["errors"]}
        self.assertEqual(failed_fields, {"username", "password", "email"})
        self.assertEqual(self.store.user_write_count, 0)

    def test_malformed_email_is_rejected(self) -> None:
        for email in ("a@b..c", "a..b@example.com", ".a@example.com"):
            response = self.client.post(
                "/users",
                json={"username": "alice", "password": "correct-pw", "email": email},
            )

            self.assertEqual(response.status_code, 422, email)
            failed_fields = {error["loc"][-1] for error in response.json()["details"]["errors"]}
            self.assertEqual(failed_fields, {"email"}, email)
        self.assertEqual(self.store.user_write_count, 0)

    def test_duplicate_username_returns_409(self) -> None:
        payload = {"username": "alice", "password": "correct-pw", "email": "alice@example.com"}
        self.assertEqual(self.client.post("/users", json=payload).status_code, 201)

        response = self.client.post("/users", json={**payload, "email": "other@example.com"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["code"], "USERNAME_TAKEN")
        self.assertEqual(len(self.store.users), 1)

    def test_username_and_email_availability_checks(self) -> None:
        self.store.create_user(
            username="alice",
            password_hash=hash_password("correct-pw"),
            email="alice@example.com",
        )

        taken_name = self.client.get("/users/check-username/alice")
        free_name = self.client.get("/users/check-username/bobby")
        taken_email = self.client.get("/users/check-email/alice@example.com")
        free_email = self.client.get("/users/check-email/bobby@example.com")

        self.assertEqual(taken_name.status_code, 400)
        self.assertEqual(taken_name.json(), {"message": "Username already exists"})
        self.assertEqual(free_name.status_code, 200)
        self.assertEqual(free_name.json(), {"message": "Username available"})
        self.assertEqual(taken_email.status_code, 400)
        self.assertEqual(taken_email.json(), {"message": "Email already exists"})
        self.assertEqual(free_email.status_code, 200)


class UserOwnershipApiTests(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.app = create_app()
        self.client = TestClient(self.app)
        self.store = self.app.state.store
        for username in ("alice", "bobby"):
            self.store.create_user(
                username=username,
                password_hash=hash_password(f"{username}-pw"),
                email=f"{username}@example.com",
            )
        self.movie = self.store.add_movie(
            title="Inception",
            genre=GenreRecord(name="Thriller"),
            director=DirectorRecord(name="Christopher Nolan"),
        )
        self.alice_headers = self._auth_headers("alice", "alice-pw")

    def _auth_headers(self, username: str, password: str) -> dict[str, str]:
        response = self.client.post("/login", json={"username": username, "password": password})
        self.assertEqual(response.status_code, 200)
        return {"Authorization": f"Bearer {response.json()['token']}"}

    def test_user_reads_require_a_token(self) -> None:
        self.assertEqual(self.client.get("/users").status_code, 401)
        self.assertEqual(self.client.get("/users/alice").status_code, 401)

        listed = self.client.get("/users", headers=self.alice_headers)
        self.assertEqual(listed.status_code, 200)
        self.assertEqual([user["username"] for user in listed.json()], ["alice", "bobby"])

        single = self.client.get("/users/bobby", headers=self.alice_headers)
        self.assertEqual(single.status_code, 200)
        self.assertEqual(single.json()["email"], "bobby@example.com")

        missing = self.client.get("/users/nobody", headers=self.alice_headers)
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["code"], "RESOURCE_NOT_FOUND")

    def test_update_without_password_keeps_existing_hash(self) -> None:
        before_hash = self.store.find_user_by_username("alice").password_hash

        response = self.client.put(
            "/users/alice",
            headers=self.alice_headers,
            json={"username": "alice", "email": "alice@new.example.com", "birthday": "1991-02-03"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["email"], "alice@new.example.com")
        self.assertEqual(self.store.find_user_by_username("alice").password_hash, before_hash)
        login = self.client.post("/login", json={"username": "alice", "password": "alice-pw"})
        self.assertEqual(login.status_code, 200)

    def test_update_with_password_replaces_hash(self) -> None:
        response = self.client.put(
            "/users/alice",
            headers=self.alice_headers,
            json={"username": "alice", "email": "alice@example.com", "password": "brand-new-pw"},
        )

        self.assertEqual(response.status_code, 200)
        old_login = self.client.post("/login", json={"username": "alice", "password": "alice-pw"})
        new_login = self.client.post("/login", json={"username": "alice", "password": "brand-new-pw"})
        self.assertEqual(old_login.status_code, 401)
        self.assertEqual(new_login.status_code, 200)

    def test_rename_keeps_existing_token_valid(self) -> None:
        response = self.client.put(
            "/users/alice",
            headers=self.alice_headers,
            json={"username": "alicia", "email": "alice@example.com"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "alicia")
        profile = self.client.get("/users/alicia", headers=self.alice_headers)
        self.assertEqual(profile.status_code, 200)

    def test_rename_onto_existing_username_returns_409(self) -> None:
        response = self.client.put(
            "/users/alice",
            headers=self.alice_headers,
            json={"username": "bobby", "email": "alice@example.com"},
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["code"], "USERNAME_TAKEN")

    def test_updating_another_account_is_forbidden_without_side_effects(self) -> None:
        writes_before = self.store.user_write_count

        response = self.client.put(
            "/users/bobby",
            headers=self.alice_headers,
            json={"username": "bobby", "email": "hijacked@example.com"},
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["code"], "PERMISSION_DENIED")
        self.assertEqual(self.store.user_write_count, writes_before)
        self.assertEqual(self.store.find_user_by_username("bobby").email, "bobby@example.com")

    def test_update_without_token_returns_no_token(self) -> None:
        response = self.client.put(
            "/users/alice",
            json={"username": "alice", "email": "alice@example.com"},
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["code"], "NO_TOKEN")

    def test_favorites_are_added_once_and_removed(self) -> None:
        path = f"/users/alice/movies/{self.movie.id}"

        first = self.client.post(path, headers=self.alice_headers)
        second = self.client.post(path, headers=self.alice_headers)
        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.json()["favorites"], [self.movie.id])

        removed = self.client.delete(path, headers=self.alice_headers)
        self.assertEqual(removed.status_code, 200)
        self.assertEqual(removed.json()["favorites"], [])

    def test_adding_unknown_movie_returns_404(self) -> None:
        response = self.client.post("/users/alice/movies/missing-movie", headers=self.alice_headers)

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.store.find_user_by_username("alice").favorites, [])

    def test_favorites_of_another_user_are_forbidden(self) -> None:
        response = self.client.post(f"/users/bobby/movies/{self.movie.id}", headers=self.alice_headers)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.find_user_by_username("bobby").favorites, [])

    def test_deleting_own_account_invalidates_its_token(self) -> None:
        response = self.client.delete("/users/alice", headers=self.alice_headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "alice was deleted."})
        self.assertIsNone(self.store.find_user_by_username("alice"))

        after = self.client.get("/users", headers=self.alice_headers)
        self.assertEqual(after.status_code, 401)
        self.assertEqual(after.json()["code"], "UNAUTHORIZED")

    def test_deleting_another_account_is_forbidden(self) -> None:
        response = self.client.delete("/users/bobby", headers=self.alice_headers)

        self.assertEqual(response.status_code, 403)
        self.assertIsNotNone(self.store.find_user_by_username("bobby"))


if __name__ == "__main__":
    unittest.main()
