import re
from utils.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$")
MAX_EMAIL_LENGTH = 254
ROLES = ("learner", "instructor")

MIN_PASSWORD_LENGTH = 6
USERNAME_LENGTH = (3, 20)
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_QUESTION_LENGTH = 500
CHOICE_COUNT = (2, 6)


def require_fields(data, *fields, message="All fields are required"):
    if not isinstance(data, dict):
        raise ValidationError("Invalid request data")
    for field in fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)
    return data


def validate_length(field_name, value, max_length):
    if len(value) > max_length:
        raise ValidationError(f"{field_name} cannot exceed {max_length} characters")


def _as_text(field_name, value):
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip()


def validate_email(email):
    email = _as_text("Email", email or "")
    if len(email) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.match(email):
        raise ValidationError("Please enter a valid email address")
    return email.lower()


def validate_password(password):
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return password


def validate_username(username):
    username = _as_text("Username", username or "")
    low, high = USERNAME_LENGTH
    if not low <= len(username) <= high:
        raise ValidationError(f"Username must be between {low} and {high} characters")
    return username


def validate_role(role):
    if role is None:
        return ROLES[0]
    if role not in ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")
    return role


def validate_quiz_title(title):
    title = _as_text("Title", title if title is not None else "")
    if not title:
        raise ValidationError("Quiz title is required")
    validate_length("Title", title, MAX_TITLE_LENGTH)
    return title


def validate_quiz_description(description):
    if description is None:
        return ""
    description = _as_text("Description", description)
    validate_length("Description", description, MAX_DESCRIPTION_LENGTH)
    return description


def validate_question_text(question_text):
    question_text = _as_text("Question text", question_text if question_text is not None else "")
    if not question_text:
        raise ValidationError("Question text is required")
    validate_length("Question text", question_text, MAX_QUESTION_LENGTH)
    return question_text


def validate_answer_choices(answer_choices):
    low, high = CHOICE_COUNT
    if not isinstance(answer_choices, list) or not low <= len(answer_choices) <= high:
        raise ValidationError(f"Must have between {low} and {high} answer choices")

    choices = [_as_text("Answer choice", choice) for choice in answer_choices]
    if not all(choices):
        raise ValidationError("Answer choices cannot be empty")
    return choices


def validate_correct_answer(correct_answer, choices):
    # bool is an int subclass; True must not pass as index 1
    if isinstance(correct_answer, bool) or not isinstance(correct_answer, int):
        raise ValidationError("Correct answer must be an integer index")
    if not 0 <= correct_answer < len(choices):
        raise ValidationError("Invalid correct answer index")
    return correct_answer


def validate_question(question_text, answer_choices, correct_answer):
    """Normalise and check a full question payload; returns the cleaned values."""
    text = validate_question_text(question_text)
    choices = validate_answer_choices(answer_choices)
    answer = validate_correct_answer(correct_answer, choices)
    return text, choices, answer
