import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from arbor.validators import callable_validator, regex_validator, yes_no_validator


def test_yes_no_validator_accepts_yes_and_no():
    validator = yes_no_validator()
    for valid in ["Y", "y", "N", "n", "yes", "No", ""]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["maybe", "1", "yep"])
def test_yes_no_validator_rejects_invalid(invalid):
    with pytest.raises(ValidationError):
        yes_no_validator().validate(Document(invalid))


def test_yes_no_validator_can_require_an_answer():
    with pytest.raises(ValidationError):
        yes_no_validator(allow_empty=False).validate(Document(""))


def test_regex_validator():
    validator = regex_validator(r"\d{3}-\d{3}-\d{4}", "Invalid phone number")
    validator.validate(Document("555-123-4567"))
    with pytest.raises(ValidationError, match="Invalid phone number"):
        validator.validate(Document("5551234567"))
    with pytest.raises(ValidationError):
        validator.validate(Document("555-123-45678"))


def test_regex_validator_default_message():
    with pytest.raises(ValidationError, match="Must match"):
        regex_validator("[a-z]+").validate(Document("ABC"))


def test_callable_validator():
    def even(text):
        return None if text.isdigit() and int(text) % 2 == 0 else "Enter an even number"

    validator = callable_validator(even)
    validator.validate(Document("4"))
    with pytest.raises(ValidationError, match="Enter an even number"):
        validator.validate(Document("3"))
