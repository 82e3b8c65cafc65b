"""Tests for the User domain model and UserFilters."""

import unittest
from datetime import datetime, timezone

from domain.model.user import User, UserFilters


def _make_user(**kwargs) -> User:
    defaults = {
        "first_name": "Alice",
        "last_name": "Tingo",
        "nickname": "atingo",
        "password": "supersecret",
        "email": "atingo@example.com",
        "country": "DE",
    }
    defaults.update(kwargs)
    return User(**defaults)


class TestUserValidity(unittest.TestCase):

    def test_complete_user_is_valid(self):
        self.assertTrue(_make_user().is_valid())

    def test_each_required_field_is_checked(self):
        for name in ("first_name", "last_name", "nickname", "password", "email", "country"):
            with self.subTest(field=name):
                user = _make_user(**{name: ""})
                self.assertFalse(user.is_valid())

    def test_whitespace_counts_as_present(self):
        """Only emptiness is checked, not content."""
        self.assertTrue(_make_user(first_name=" ").is_valid())

    def test_missing_fields_uses_wire_names(self):
        user = _make_user(email="", first_name="")
        self.assertEqual(user.missing_fields(), ["firstName", "email"])


class TestUserModify(unittest.TestCase):

    def test_adopts_changed_fields(self):
        user = _make_user()
        user.modify(_make_user(first_name="Bob", country="FR"))
        self.assertEqual(user.first_name, "Bob")
        self.assertEqual(user.country, "FR")
        self.assertEqual(user.last_name, "Tingo")

    def test_empty_incoming_values_overwrite(self):
        """Only firstName sent: every other field is emptied, not kept."""
        user = _make_user()
        user.modify(User(first_name="X"))

        self.assertEqual(user.first_name, "X")
        self.assertEqual(user.last_name, "")
        self.assertEqual(user.nickname, "")
        self.assertEqual(user.password, "")
        self.assertEqual(user.email, "")
        self.assertEqual(user.country, "")
        self.assertFalse(user.is_valid())

    def test_id_and_timestamps_are_untouched(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        user = _make_user(id="abc", created_at=created, updated_at=created)
        user.modify(_make_user(id="other", created_at=datetime.now(timezone.utc)))
        self.assertEqual(user.id, "abc")
        self.assertEqual(user.created_at, created)
        self.assertEqual(user.updated_at, created)


class TestUserSerialization(unittest.TestCase):

    def test_to_dict_uses_camel_case(self):
        ts = datetime(2016, 5, 18, 16, 0, 0, tzinfo=timezone.utc)
        data = _make_user(id="u-1", created_at=ts, updated_at=ts).to_dict()
        self.assertEqual(data, {
            "id": "u-1",
            "firstName": "Alice",
            "lastName": "Tingo",
            "nickname": "atingo",
            "password": "supersecret",
            "email": "atingo@example.com",
            "country": "DE",
            "createdAt": "2016-05-18T16:00:00Z",
            "updatedAt": "2016-05-18T16:00:00Z",
        })

    def test_from_dict_restores_user(self):
        ts = datetime(2016, 5, 18, 16, 0, 0, tzinfo=timezone.utc)
        user = _make_user(id="u-1", created_at=ts, updated_at=ts)
        self.assertEqual(User.from_dict(user.to_dict()), user)

    def test_naive_timestamps_are_treated_as_utc(self):
        naive = datetime(2020, 2, 2, 2, 2, 2)
        data = _make_user(created_at=naive, updated_at=naive).to_dict()
        self.assertEqual(data["createdAt"], "2020-02-02T02:02:02Z")


class TestUserFilters(unittest.TestCase):

    def test_empty_filters_match_all(self):
        self.assertEqual(UserFilters().to_query(), {})

    def test_single_field(self):
        self.assertEqual(UserFilters(country="DE").to_query(), {"country": "DE"})

    def test_fields_use_persisted_names(self):
        query = UserFilters(first_name="Alice", last_name="Tingo", email="a@example.com", country="DE").to_query()
        self.assertEqual(query, {
            "first_name": "Alice",
            "last_name": "Tingo",
            "email": "a@example.com",
            "country": "DE",
        })

    def test_nickname_is_not_compiled(self):
        """The nickname filter is accepted but does not constrain the query."""
        self.assertEqual(UserFilters(nickname="atingo").to_query(), {})
        self.assertEqual(UserFilters(nickname="atingo", country="DE").to_query(), {"country": "DE"})


if __name__ == '__main__':
    unittest.main()
