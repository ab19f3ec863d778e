from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict, Field

from record_factory import Fixed, Supplier
from record_factory.core.errors import InvalidValueError
from record_factory.core.executor import apply_params


@dataclass
class Account:
    name: str = ""
    balance: int = 0


def test_apply_params_assigns_literals_and_suppliers():
    acct = Account()
    apply_params(acct, {"name": "anon", "balance": Supplier(lambda: 42)})
    assert acct == Account(name="anon", balance=42)


def test_suppliers_are_invoked_per_application():
    n = {"v": 0}

    def bump():
        n["v"] += 1
        return n["v"]

    a, b = Account(), Account()
    apply_params(a, {"balance": bump})
    apply_params(b, {"balance": bump})
    assert (a.balance, b.balance) == (1, 2)


def test_fixed_value_is_assigned_verbatim():
    acct = Account()
    fn = lambda: "x"  # noqa: E731
    apply_params(acct, {"name": Fixed(fn)})
    assert acct.name is fn


def test_failing_supplier_leaves_target_untouched():
    def boom():
        raise RuntimeError("boom")

    acct = Account(name="before", balance=1)
    with pytest.raises(RuntimeError):
        apply_params(acct, {"name": "after", "balance": boom})
    assert acct == Account(name="before", balance=1)


class Member(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    age: int = Field(default=0, ge=0)


def test_rejected_assignment_rolls_back_earlier_fields():
    m = Member()
    with pytest.raises(InvalidValueError) as exc:
        apply_params(m, {"name": "bob", "age": -1})

    assert exc.value.field == "age"
    assert (m.name, m.age) == ("", 0)
    assert m.model_fields_set == set()
