"""Ordered field rules for project submissions.

Rules run in declaration order and stop at the first failure, so a client
only ever sees one message at a time.
"""

import re
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from collab.models.project import ProjectCreate

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 30
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 255
MAX_TAGS = 10
HANDLE_MAX_LENGTH = 100
URL_FIELDS = ("live_url", "trello_url", "github_url")

# Routes under /api/projects that a handle must not shadow.
RESERVED_HANDLES = frozenset({"user"})

# Alphanumeric runs (any script) joined by exactly one hyphen, underscore or space.
_NAME_RE = re.compile(r"[^\W_]+(?:[ _-][^\W_]+)*")
_HANDLE_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_SEPARATOR_RE = re.compile(r"[ _-]+")

_url_adapter = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    rule: str | None = None
    message: str | None = None


Rule = Callable[[ProjectCreate], str | None]


def check_name_length(project: ProjectCreate) -> str | None:
    if len(project.name) < NAME_MIN_LENGTH:
        return f"Project name must be {NAME_MIN_LENGTH} or more characters"
    if len(project.name) > NAME_MAX_LENGTH:
        return f"Project name must be less than {NAME_MAX_LENGTH} characters"
    return None


def check_name_charset(project: ProjectCreate) -> str | None:
    if not _NAME_RE.fullmatch(project.name):
        return (
            "Project name must contain only alphabetic characters or numbers "
            "and only 1 hyphen, underscore or space between them"
        )
    return None


def check_description_length(project: ProjectCreate) -> str | None:
    if len(project.description) < DESCRIPTION_MIN_LENGTH:
        return f"Description must be {DESCRIPTION_MIN_LENGTH} or more characters"
    if len(project.description) > DESCRIPTION_MAX_LENGTH:
        return f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less"
    return None


def check_tag_count(project: ProjectCreate) -> str | None:
    if project.tags and len(project.tags) > MAX_TAGS:
        return f"You may only enter up to {MAX_TAGS} tags!"
    return None


def is_valid_url(value: str) -> bool:
    """True for an absolute URL carrying both a scheme and a host."""
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return bool(url.scheme and url.host)


def check_urls(project: ProjectCreate) -> str | None:
    for field in URL_FIELDS:
        value = getattr(project, field)
        if value and not is_valid_url(value):
            return f"{field} is an invalid URL"
    return None


def check_handle_format(project: ProjectCreate) -> str | None:
    handle = project.handle
    if not handle:
        return None
    if (
        len(handle) > HANDLE_MAX_LENGTH
        or handle in RESERVED_HANDLES
        or not _HANDLE_RE.fullmatch(handle)
    ):
        return "Project handle must contain only lowercase letters, numbers and single hyphens"
    return None


RULES: list[tuple[str, Rule]] = [
    ("name_length", check_name_length),
    ("name_charset", check_name_charset),
    ("description_length", check_description_length),
    ("tag_count", check_tag_count),
    ("urls", check_urls),
    ("handle_format", check_handle_format),
]


def validate_project(project: ProjectCreate) -> ValidationResult:
    """Run every rule in order and return the first failure, if any."""
    for rule_name, rule in RULES:
        message = rule(project)
        if message is not None:
            return ValidationResult(ok=False, rule=rule_name, message=message)
    return ValidationResult(ok=True)


def derive_handle(name: str) -> str:
    """Build a URL-safe handle from an already validated project name."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = _SEPARATOR_RE.sub("-", ascii_name.strip().lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug).strip("-")
    slug = re.sub(r"-{2,}", "-", slug)
    if not slug:
        slug = "project"
    if slug in RESERVED_HANDLES:
        slug = f"{slug}-project"
    return slug
