"""Nested allow/deny rule tables: resources hold roles, roles hold privileges."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Sequence


class Rule(enum.Enum):
    """Whether access is granted or refused."""

    ALLOW = 0
    DENY = 1


class RuleContextScope(enum.Enum):
    """Whether a rule was applied to named symbols or to all symbols."""

    PER_SYMBOL = enum.auto()
    FOR_ALL_SYMBOLS = enum.auto()


@dataclass(init=False)
class PrivilegeRules:
    """Rules keyed by privilege, with a fallback rule for every privilege."""

    for_all_privileges: Rule
    by_privilege_id: dict[str, Rule] | None

    def __init__(self, create_privilege_map: bool = False) -> None:
        self.for_all_privileges = Rule.DENY
        self.by_privilege_id = {} if create_privilege_map else None

    def copy(self) -> "PrivilegeRules":
        """Return an independent copy."""
        return copy.deepcopy(self)

    def get_rule(self, privilege_id: str | None) -> Rule:
        """Return the rule for ``privilege_id``, or the rule for all privileges."""
        if privilege_id is not None and self.by_privilege_id is not None:
            found = self.by_privilege_id.get(privilege_id)
            if found is not None:
                return found
        return self.for_all_privileges

    def set_rule(self, privilege_ids: Sequence[str] | None, rule: Rule) -> RuleContextScope:
        """Set ``rule`` for each privilege, or for all privileges when none are given."""
        if not privilege_ids:
            self.for_all_privileges = rule
            return RuleContextScope.FOR_ALL_SYMBOLS
        if self.by_privilege_id is None:
            self.by_privilege_id = {}
        for privilege_id in privilege_ids:
            self.by_privilege_id[privilege_id] = rule
        return RuleContextScope.PER_SYMBOL


@dataclass(init=False)
class RolePrivilegeRules:
    """Privilege rules keyed by role, with a fallback for every role."""

    for_all_roles: PrivilegeRules
    by_role_id: dict[str, PrivilegeRules] | None

    def __init__(self, create_child_maps: bool = False) -> None:
        self.for_all_roles = PrivilegeRules(create_child_maps)
        self.by_role_id = {} if create_child_maps else None

    def copy(self) -> "RolePrivilegeRules":
        """Return an independent copy."""
        return copy.deepcopy(self)

    def get_privilege_rules(self, role: str | None) -> PrivilegeRules:
        """Return the privilege rules for ``role``, or those for all roles."""
        if role is not None and self.by_role_id is not None:
            found = self.by_role_id.get(role)
            if found is not None:
                return found
        return self.for_all_roles

    def set_privilege_rules_for_role_ids(
        self, role_ids: Sequence[str], privilege_rules: PrivilegeRules
    ) -> RuleContextScope:
        """Store a copy of ``privilege_rules`` for each role, or for all roles if none."""
        if not role_ids:
            self.for_all_roles = privilege_rules
            return RuleContextScope.FOR_ALL_SYMBOLS
        if self.by_role_id is None:
            self.by_role_id = {}
        for role_id in role_ids:
            self.by_role_id[role_id] = privilege_rules.copy()
        return RuleContextScope.PER_SYMBOL

    def set_privilege_rules(
        self,
        role_ids: Sequence[str] | None,
        privilege_rules: PrivilegeRules | None,
    ) -> RuleContextScope:
        """Set privilege rules for the given roles; missing values fall back to defaults."""
        rules = privilege_rules if privilege_rules is not None else PrivilegeRules(False)
        if role_ids is not None:
            return self.set_privilege_rules_for_role_ids(role_ids, rules)
        self.for_all_roles = rules
        return RuleContextScope.FOR_ALL_SYMBOLS


@dataclass(init=False)
class ResourceRoleRules:
    """Role rules keyed by resource, with a fallback for every resource."""

    for_all_resources: RolePrivilegeRules
    by_resource_id: dict[str, RolePrivilegeRules]

    def __init__(self) -> None:
        self.for_all_resources = RolePrivilegeRules(True)
        self.by_resource_id = {}

    def get_role_privilege_rules(self, resource: str | None) -> RolePrivilegeRules:
        """Return the role rules for ``resource``, or those for all resources."""
        if resource is not None:
            found = self.by_resource_id.get(resource)
            if found is not None:
                return found
        return self.for_all_resources

    def set_role_privilege_rules(
        self,
        resources: Sequence[str] | None,
        role_privilege_rules: RolePrivilegeRules | None,
    ) -> RuleContextScope:
        """Set role rules for each resource, or for all resources when none are given."""
        rules = (
            role_privilege_rules
            if role_privilege_rules is not None
            else RolePrivilegeRules(False)
        )
        if resources is None:
            self.for_all_resources = rules
            return RuleContextScope.FOR_ALL_SYMBOLS
        if resources:
            for resource_id in resources:
                self.by_resource_id[resource_id] = rules.copy()
        else:
            self.for_all_resources = rules
        return RuleContextScope.PER_SYMBOL