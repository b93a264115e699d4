"""The four CRUD jobs that the scheduled tasks perform."""

from __future__ import annotations

import random
import sys
import time
from typing import Callable, TextIO

from crudsched.db import UserDatabase

NAMES = ("Ana", "Bruno", "Carlos", "Diana", "Eduardo", "Fernanda", "Gabriel", "Helena")

_Sleep = Callable[[float], object]


def _rng(rng):
    return rng if rng is not None else random


def _simulate_latency(rng, sleep: _Sleep) -> int:
    latency = rng.randrange(6) + 2
    sleep(latency)
    return latency


def random_user(rng: random.Random | None = None) -> tuple[str, str]:
    """Pick a random name and build an e-mail address for it."""
    rng = _rng(rng)
    name = NAMES[rng.randrange(len(NAMES))]
    email = f"{name}{rng.randrange(1000)}@example.com"
    return name, email


def crud_insert(
    db: UserDatabase,
    rng: random.Random | None = None,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> int:
    """Insert a random user, then wait 2-7 seconds; return the wait."""
    rng = _rng(rng)
    out = out if out is not None else sys.stdout
    print("[INSERT] Iniciando tarefa de inserção", file=out)
    db.insert_user(*random_user(rng))
    latency = _simulate_latency(rng, sleep)
    print("[INSERT] Finalizada inserção", file=out)
    return latency


def crud_list(
    db: UserDatabase,
    rng: random.Random | None = None,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> int:
    """Print all users, then wait 2-7 seconds; return the wait."""
    rng = _rng(rng)
    out = out if out is not None else sys.stdout
    print("[LIST] Listando usuários", file=out)
    db.print_users(out)
    return _simulate_latency(rng, sleep)


def crud_update(
    db: UserDatabase,
    rng: random.Random | None = None,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> int:
    """Give user 1 a random name and e-mail, then wait 2-7 seconds."""
    rng = _rng(rng)
    out = out if out is not None else sys.stdout
    print("[UPDATE] Iniciando atualização", file=out)
    db.update_user(1, *random_user(rng))
    latency = _simulate_latency(rng, sleep)
    print("[UPDATE] Finalizada atualização", file=out)
    return latency


def crud_delete(
    db: UserDatabase,
    rng: random.Random | None = None,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> int:
    """Remove every user with id 1 or above, then wait 2-7 seconds."""
    rng = _rng(rng)
    out = out if out is not None else sys.stdout
    print("[DELETE] Iniciando remoção", file=out)
    db.remove_users_from(1)
    latency = _simulate_latency(rng, sleep)
    print("[DELETE] Finalizada remoção", file=out)
    return latency