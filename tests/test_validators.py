import pytest
from taskapi.errors import ValidationError
from taskapi.schemas.task import TaskRequest
from taskapi.schemas.user import UserRequest
from taskapi.validators.task import TaskValidator
from taskapi.validators.user import UserValidator


@pytest.mark.parametrize("title", ["a", "hi", "0123456789", "ééééééééé", "日本語のタスク"])
def test_task_title_within_limit_is_valid(title):
    TaskValidator().validate(TaskRequest(title=title))


def test_task_title_is_required():
    with pytest.raises(ValidationError) as e:
        TaskValidator().validate(TaskRequest(title=""))
    assert e.value.message == "title is required"


def test_task_title_longer_than_ten_chars_is_rejected():
    with pytest.raises(ValidationError) as e:
        TaskValidator().validate(TaskRequest(title="01234567890"))
    assert e.value.message == "limited max 10 char"


def test_task_title_length_counts_characters_not_bytes():
    # 10 characters, 30 bytes in UTF-8
    TaskValidator().validate(TaskRequest(title="あいうえおかきくけこ"))
    with pytest.raises(ValidationError):
        TaskValidator().validate(TaskRequest(title="あいうえおかきくけこさ"))


def test_user_valid():
    UserValidator().validate(UserRequest(email="a@x.com", password="secret"))


def test_user_email_required():
    with pytest.raises(ValidationError) as e:
        UserValidator().validate(UserRequest(email="", password="secret"))
    assert e.value.message == "email is required"


def test_user_email_format():
    with pytest.raises(ValidationError) as e:
        UserValidator().validate(UserRequest(email="not_an_email", password="secret"))
    assert e.value.message == "is not valid email format"


def test_user_password_required():
    with pytest.raises(ValidationError) as e:
        UserValidator().validate(UserRequest(email="a@x.com", password=""))
    assert e.value.message == "password is required"


def test_validation_does_not_correct_input():
    user = UserRequest(email="A@X.com", password="secret")
    UserValidator().validate(user)
    assert user.email == "A@X.com"
