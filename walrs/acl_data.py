"""Plain-data description of an access control list, loadable from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from typing import Any, Mapping, TextIO

from walrs.acl import Acl

SymbolEntry = tuple[str, "tuple[str, ...] | None"]
RuleEntry = tuple[str, "tuple[tuple[str, tuple[str, ...] | None], ...] | None"]


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected a string, got {value!r}")
    return value


def _string_list(value: Any, where: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{where}: expected a list of strings or null, got {value!r}")
    return tuple(_string(item, where) for item in value)


def _pair(value: Any, where: str) -> tuple[str, Any]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{where}: expected a [name, value] pair, got {value!r}")
    return _string(value[0], where), value[1]


def _entries(value: Any, where: str) -> list[Any] | None:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{where}: expected a list or null, got {value!r}")
    return list(value)


def _symbol_entries(value: Any, where: str) -> tuple[SymbolEntry, ...] | None:
    entries = _entries(value, where)
    if entries is None:
        return None
    parsed = []
    for entry in entries:
        name, parents = _pair(entry, where)
        parsed.append((name, _string_list(parents, where)))
    return tuple(parsed)


def _rule_entries(value: Any, where: str) -> tuple[RuleEntry, ...] | None:
    entries = _entries(value, where)
    if entries is None:
        return None
    parsed = []
    for entry in entries:
        resource, role_privileges = _pair(entry, where)
        role_entries = _entries(role_privileges, where)
        if role_entries is None:
            parsed.append((resource, None))
            continue
        roles = []
        for role_entry in role_entries:
            role, privileges = _pair(role_entry, where)
            roles.append((role, _string_list(privileges, where)))
        parsed.append((resource, tuple(roles)))
    return tuple(parsed)


@dataclass(frozen=True)
class AclData:
    """Roles, resources and rules as plain data.

    ``roles`` and ``resources`` hold ``(name, parents)`` pairs; ``allow`` and
    ``deny`` hold ``(resource, [(role, privileges), ...])`` pairs, where a
    missing role list or privilege list means "all".
    """

    roles: tuple[SymbolEntry, ...] | None = None
    resources: tuple[SymbolEntry, ...] | None = None
    allow: tuple[RuleEntry, ...] | None = None
    deny: tuple[RuleEntry, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AclData":
        """Build from a mapping shaped like the JSON document; raises ``ValueError``."""
        if not isinstance(data, Mapping):
            raise ValueError(f"ACL data must be an object, got {data!r}")
        return cls(
            roles=_symbol_entries(data.get("roles"), "roles"),
            resources=_symbol_entries(data.get("resources"), "resources"),
            allow=_rule_entries(data.get("allow"), "allow"),
            deny=_rule_entries(data.get("deny"), "deny"),
        )

    @classmethod
    def from_file(cls, fp: TextIO) -> "AclData":
        """Read a JSON document from an open text file."""
        return cls.from_dict(json.load(fp))

    def to_acl(self) -> Acl:
        """Build an ``Acl`` from the roles, resources and allow rules."""
        acl = Acl()
        for role, parents in self.roles or ():
            acl.add_role(role, list(parents) if parents is not None else None)
        for resource, parents in self.resources or ():
            acl.add_resource(resource, list(parents) if parents is not None else None)
        for resource, role_privileges in self.allow or ():
            if role_privileges is None:
                acl.allow(None, [resource], None)
                continue
            for role, privileges in role_privileges:
                acl.allow(
                    [role],
                    [resource],
                    list(privileges) if privileges is not None else None,
                )
        return acl


def load_acl(path: str | PathLike[str]) -> Acl:
    """Read an ACL JSON file and build the ``Acl`` it describes."""
    with open(path, encoding="utf-8") as fp:
        return AclData.from_file(fp).to_acl()