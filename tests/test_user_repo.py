from models.user import User
from repositories.user_repo import UserRepository

ROW = {"id": 3, "name": "Devin Sanders", "email": "tristanjacobs@gmail.com", "password": "hash"}


def test_get_user_with_email_lowercases(store):
    store.rows = [ROW]
    user = UserRepository(store).get_user_with_email("TristanJacobs@Gmail.com")
    assert "lower(email) = %s" in store.last_sql
    assert store.last_params == ["tristanjacobs@gmail.com"]
    assert user == User(id=3, name="Devin Sanders", email="tristanjacobs@gmail.com", password="hash")


def test_get_user_with_email_missing(store):
    assert UserRepository(store).get_user_with_email("nobody@example.com") is None


def test_get_user_with_id(store):
    store.rows = [ROW]
    user = UserRepository(store).get_user_with_id(3)
    assert "WHERE id = %s" in store.last_sql
    assert store.last_params == [3]
    assert user.name == "Devin Sanders"


def test_get_user_with_id_missing(store):
    assert UserRepository(store).get_user_with_id(99) is None


def test_add_user(store):
    store.rows = [ROW]
    stored = UserRepository(store).add_user(
        User(name="Devin Sanders", email="tristanjacobs@gmail.com", password="hash")
    )
    statement, params, commit = store.calls[-1]
    assert "INSERT INTO users (name, email, password)" in statement
    assert params == ["Devin Sanders", "tristanjacobs@gmail.com", "hash"]
    assert commit is True
    assert stored.id == 3


def test_falsy_store_is_still_used(store):
    class EmptySizedStore(type(store)):
        def __len__(self):
            return 0

    empty = EmptySizedStore()
    assert UserRepository(empty).store is empty
