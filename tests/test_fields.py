from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from record_factory.core.fields import is_record_type, match_field, record_fields, record_kind


@dataclass
class Account:
    name: str = ""
    balance: int = 0
    tags: List[str] = field(default_factory=list)
    _secret: str = ""
    kind: ClassVar[str] = "account"


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Broken:
    ref: "DoesNotExist" = None  # noqa: F821


class Profile(BaseModel):
    handle: str = "anon"
    age: Optional[int] = None
    locked: str = Field(default="x", frozen=True)


class FrozenProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    handle: str = "anon"


class Plain:
    title: str
    count: int = 0
    registry: ClassVar[dict] = {}

    @property
    def label(self) -> str:
        return self.title

    label: str  # type: ignore[no-redef]


class Color(Enum):
    RED = 1


class Pair(NamedTuple):
    a: int
    b: int


def test_record_kind_classifies_supported_records():
    assert record_kind(Account) == "dataclass"
    assert record_kind(Profile) == "pydantic"
    assert record_kind(Plain) == "annotated"


def test_record_kind_rejects_non_records():
    for cls in (int, str, dict, Color, Pair, object):
        assert record_kind(cls) is None
    assert not is_record_type(Account())
    assert not is_record_type(42)


def test_dataclass_fields_resolve_annotations():
    fields = record_fields(Account)
    assert set(fields) == {"name", "balance", "tags", "_secret"}
    assert fields["balance"].annotation is int
    assert fields["tags"].annotation == List[str]
    assert fields["name"].owner is Account


def test_match_field_exact_name_only():
    assert match_field(Account, "name").annotation is str
    assert match_field(Account, "Name") is None
    assert match_field(Account, "missing") is None
    assert match_field(Account, 1) is None


def test_private_and_classvar_fields_are_not_matched():
    assert match_field(Account, "_secret") is None
    assert match_field(Account, "kind") is None


def test_frozen_dataclass_fields_are_not_assignable():
    assert "x" in record_fields(Point)
    assert record_fields(Point)["x"].assignable is False
    assert match_field(Point, "x") is None


def test_unresolvable_forward_reference_degrades_to_any():
    assert match_field(Broken, "ref").annotation is Any


def test_pydantic_fields_and_frozen_rules():
    assert match_field(Profile, "age").annotation == Optional[int]
    assert match_field(Profile, "locked") is None
    assert match_field(FrozenProfile, "handle") is None


def test_annotated_class_fields():
    assert match_field(Plain, "title").annotation is str
    assert match_field(Plain, "count").annotation is int
    assert match_field(Plain, "registry") is None
    # read-only property shadows the annotation
    assert match_field(Plain, "label") is None
