"""In-memory store and repository tests."""

from user_management_backend.database import (
    SEED_USERS,
    UserRepository,
    UserSchema,
    UserStore,
)


def test_seeded_store_holds_sample_rows_in_order() -> None:
    store = UserStore.seeded()

    assert [(user.id, user.name) for user in store] == [
        (1, "John Doe"),
        (2, "Jane Smith"),
    ]
    assert len(store) == len(SEED_USERS)


def test_empty_store_issues_id_one() -> None:
    store = UserStore()

    assert store.next_id() == 1


def test_next_id_follows_highest_existing_id() -> None:
    store = UserStore(
        [
            UserSchema(id=7, name="A", email="a@example.com", age=1),
            UserSchema(id=3, name="B", email="b@example.com", age=2),
        ]
    )

    assert store.next_id() == 8


def test_append_overwrites_supplied_id() -> None:
    store = UserStore.seeded()
    user = store.append(UserSchema(id=99, name="X", email="x@x.com", age=1))

    assert user.id == 3
    assert store.find(3) is user


def test_ids_are_never_recycled_after_deleting_newest_row() -> None:
    repository = UserRepository(UserStore.seeded())
    created = repository.add(name="X", email="x@x.com", age=1)
    assert repository.delete(created.id)

    again = repository.add(name="Y", email="y@y.com", age=2)

    assert again.id == created.id + 1


def test_ids_strictly_increase_across_mixed_operations() -> None:
    repository = UserRepository(UserStore())
    issued = []
    for index in range(5):
        issued.append(repository.add(name=f"u{index}", email="", age=index).id)
        if index % 2 == 0:
            repository.delete(issued[-1])

    assert issued == sorted(set(issued))
    assert issued == [1, 2, 3, 4, 5]


def test_update_keeps_id_and_overwrites_fields() -> None:
    repository = UserRepository(UserStore.seeded())

    user = repository.update(2, name="Janet", email="janet@example.com", age=26)

    assert user is not None
    assert (user.id, user.name, user.email, user.age) == (
        2,
        "Janet",
        "janet@example.com",
        26,
    )


def test_update_missing_user_leaves_store_untouched() -> None:
    store = UserStore.seeded()
    before = [(u.id, u.name, u.email, u.age) for u in store]

    assert UserRepository(store).update(42, name="Z", email="z", age=9) is None
    assert [(u.id, u.name, u.email, u.age) for u in store] == before


def test_delete_reports_missing_user() -> None:
    repository = UserRepository(UserStore.seeded())

    assert repository.delete(1) is True
    assert repository.delete(1) is False
    assert [user.id for user in repository.list_all()] == [2]


def test_next_id_survives_emptying_the_store() -> None:
    store = UserStore.seeded()
    for user in list(store):
        store.remove(user)

    assert len(store) == 0
    assert store.next_id() == 3
