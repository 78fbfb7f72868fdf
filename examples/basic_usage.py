#!/usr/bin/env python3
"""
Basic Usage - Loadable

Shows the two transition styles:
- in place (set_*) for a container owned by one piece of code
- pure (to_*) through a LoadableCell when several requests race

Run: python examples/basic_usage.py
"""

from loadable import Loadable, LoadableCell
from loadable.config import ConfigLoader
from loadable.logging import configure_logging_from_config


def fetch_profile(user_id: str) -> dict:
    if user_id == "missing":
        raise LookupError(f"no profile for {user_id}")
    return {"id": user_id, "name": "Ada"}


def load_in_place(user_id: str) -> Loadable:
    profile: Loadable = Loadable()
    profile.set_loading()
    try:
        profile.set_loaded(fetch_profile(user_id))
    except LookupError as e:
        profile.set_failed(e)
    return profile


def load_through_cell(cell: LoadableCell, user_id: str) -> None:
    token = cell.begin(Loadable.to_loading)
    try:
        data = fetch_profile(user_id)
    except LookupError as e:
        cell.settle(token, lambda s: s.to_failed(e))
    else:
        cell.settle(token, lambda s: s.to_loaded(data))


def main():
    config = ConfigLoader.create().load({"logging": {"level": "DEBUG"}})
    configure_logging_from_config(config)

    print("in place:", load_in_place("ada"))
    print("in place:", load_in_place("missing"))

    cell = LoadableCell.from_config(config, name="profile")
    load_through_cell(cell, "ada")
    print("cell:", cell.current)

    # A late completion of an older request is dropped.
    stale = cell.begin(Loadable.to_loading)
    fresh = cell.begin(Loadable.to_loading)
    cell.settle(fresh, lambda s: s.to_loaded({"id": "ada", "name": "Ada L."}))
    cell.settle(stale, lambda s: s.to_loaded({"id": "ada", "name": "old"}))
    print("cell:", cell.current)


if __name__ == "__main__":
    main()
