import auth
import models
from repositories import UserRepository
from seed import ACCOUNTS, DEFAULT_PASSWORD, seed


def _snapshot(db):
    users = db.query(models.User).order_by(models.User.id).all()
    roles = db.query(models.Role).order_by(models.Role.id).all()
    return (
        [(u.id, u.username, u.email, tuple(u.role_names)) for u in users],
        [(r.id, r.name) for r in roles],
    )


def test_seed_creates_roles_and_accounts(db_session):
    seed(db_session)

    users, roles = _snapshot(db_session)
    assert [name for _, name in roles] == ["Administrator", "Customer"]
    assert [(username, email, role_names[0]) for _, username, email, role_names in users] == list(ACCOUNTS)


def test_seed_is_idempotent(db_session):
    seed(db_session)
    first = _snapshot(db_session)

    seed(db_session)
    second = _snapshot(db_session)

    assert first == second
    assert len(second[0]) == 5
    assert len(second[1]) == 2


def test_seeded_passwords(db_session):
    seed(db_session)

    users = UserRepository(db_session)
    admin = users.find_by_email("admin@bookstore.com")
    assert users.check_password(admin, DEFAULT_PASSWORD)
    assert admin.role_names == [auth.ADMINISTRATOR]


def test_seed_keeps_existing_account(db_session):
    users = UserRepository(db_session)
    existing = models.User(username="boss", email="admin@bookstore.com")
    assert users.create_with_password(existing, "changed-password")

    seed(db_session)

    admin = users.find_by_email("admin@bookstore.com")
    assert admin.username == "boss"
    assert users.check_password(admin, "changed-password")
    assert db_session.query(models.User).count() == 5
