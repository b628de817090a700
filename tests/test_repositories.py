import pytest
from taskapi.errors import DuplicateRecordError, ObjectDoesNotExistError, RecordNotFoundError
from taskapi.models.task import Task
from taskapi.models.user import User
from taskapi.repositories.task import TaskRepository
from taskapi.repositories.user import UserRepository


@pytest.fixture
def users(session_factory):
    return UserRepository(session_factory)


@pytest.fixture
def tasks(session_factory):
    return TaskRepository(session_factory)


@pytest.fixture
def alice(users):
    return users.create_user(User(email="alice@example.com", password="hash-a"))


@pytest.fixture
def bob(users):
    return users.create_user(User(email="bob@example.com", password="hash-b"))


def test_create_user_assigns_id(alice, users):
    assert alice.id is not None
    stored = users.get_user_by_email("alice@example.com")
    assert stored.id == alice.id
    assert stored.password == "hash-a"


def test_get_unknown_email_is_not_found(users):
    with pytest.raises(RecordNotFoundError) as e:
        users.get_user_by_email("nobody@example.com")
    assert e.value.message == "record not found"


def test_duplicate_email_is_reported(alice, users):
    with pytest.raises(DuplicateRecordError):
        users.create_user(User(email="alice@example.com", password="other"))


def test_create_task_sets_id_and_equal_timestamps(alice, tasks):
    task = tasks.create_task(Task(title="hi", user_id=alice.id))
    assert task.id is not None
    assert task.created_at == task.updated_at


def test_get_all_tasks_is_owner_scoped_and_oldest_first(alice, bob, tasks):
    first = tasks.create_task(Task(title="one", user_id=alice.id))
    tasks.create_task(Task(title="bob's", user_id=bob.id))
    second = tasks.create_task(Task(title="two", user_id=alice.id))

    result = tasks.get_all_tasks(alice.id)
    assert [t.id for t in result] == [first.id, second.id]
    assert tasks.get_all_tasks(999) == []


def test_get_task_of_other_owner_is_not_found(alice, bob, tasks):
    task = tasks.create_task(Task(title="mine", user_id=alice.id))
    assert tasks.get_task_by_id(alice.id, task.id).title == "mine"
    with pytest.raises(RecordNotFoundError):
        tasks.get_task_by_id(bob.id, task.id)


def test_update_task_returns_post_write_state(alice, tasks):
    task = tasks.create_task(Task(title="old", user_id=alice.id))
    updated = tasks.update_task("new", alice.id, task.id)
    assert updated.id == task.id
    assert updated.title == "new"
    assert updated.updated_at >= updated.created_at


def test_update_task_of_other_owner_does_not_exist(alice, bob, tasks):
    task = tasks.create_task(Task(title="mine", user_id=alice.id))
    with pytest.raises(ObjectDoesNotExistError) as e:
        tasks.update_task("stolen", bob.id, task.id)
    assert e.value.message == "object does not exist"
    assert tasks.get_task_by_id(alice.id, task.id).title == "mine"


def test_update_missing_task_does_not_exist(alice, tasks):
    with pytest.raises(ObjectDoesNotExistError):
        tasks.update_task("x", alice.id, 12345)


def test_delete_task(alice, bob, tasks):
    task = tasks.create_task(Task(title="mine", user_id=alice.id))
    with pytest.raises(ObjectDoesNotExistError):
        tasks.delete_task(bob.id, task.id)

    tasks.delete_task(alice.id, task.id)
    with pytest.raises(RecordNotFoundError):
        tasks.get_task_by_id(alice.id, task.id)
    with pytest.raises(ObjectDoesNotExistError):
        tasks.delete_task(alice.id, task.id)
