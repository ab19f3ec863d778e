from dataclasses import dataclass, field
from typing import List

import pytest

from record_factory import Factory, FactorySettings, Supplier, choice, cycle, factory_of, sequence, uuid4_str


@dataclass
class User:
    id: int = 0
    email: str = ""
    role: str = ""
    token: str = ""
    groups: List[str] = field(default_factory=list)


def test_sequence_counts_and_formats():
    s = sequence()
    assert isinstance(s, Supplier)
    assert [s(), s(), s()] == [1, 2, 3]

    s = sequence(start=10, step=5, fmt="user{}@example.com")
    assert [s(), s()] == ["user10@example.com", "user15@example.com"]


def test_cycle_repeats_values():
    c = cycle(["admin", "viewer"])
    assert [c() for _ in range(5)] == ["admin", "viewer", "admin", "viewer", "admin"]


def test_choice_is_reproducible_with_seed():
    a = choice(["x", "y", "z"], seed=7)
    b = choice(["x", "y", "z"], seed=7)
    assert [a() for _ in range(10)] == [b() for _ in range(10)]


def test_empty_pools_are_rejected():
    with pytest.raises(ValueError):
        cycle([])
    with pytest.raises(ValueError):
        choice([])


def test_uuid4_str_is_unique():
    u = uuid4_str()
    assert len({u() for _ in range(20)}) == 20


def test_factory_of_returns_fresh_objects():
    f = factory_of(list)
    first, second = f(), f()
    assert first == second == []
    assert first is not second


def test_suppliers_in_batch_build():
    fac = Factory(settings=FactorySettings())
    fac.register(User, {
        "id": sequence(),
        "email": sequence(fmt="user{}@example.com"),
        "role": cycle(["admin", "viewer"]),
        "token": uuid4_str(),
        "groups": factory_of(list),
    })
    users = fac.build_many(User(), 4)

    assert len({u.id for u in users}) == 4
    assert len({u.email for u in users}) == 4
    assert len({u.token for u in users}) == 4
    assert {u.role for u in users} == {"admin", "viewer"}
    users[0].groups.append("ops")
    assert users[1].groups == []
