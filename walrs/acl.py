"""Access control list: roles and resources with inheritance, and allow/deny rules."""

from __future__ import annotations

from typing import Callable, Sequence

from walrs.dfs import DigraphDFS
from walrs.rules import PrivilegeRules, ResourceRoleRules, Rule, RolePrivilegeRules
from walrs.symbol_digraph import DisymGraph


def _inherits(graph: DisymGraph, symbol: str, inherits: str) -> bool:
    v1 = graph.index(symbol)
    v2 = graph.index(inherits)
    if v1 is None or v2 is None:
        raise ValueError(f"{inherits} is not in symbol graph")
    return DigraphDFS(graph.graph(), v1).marked(v2)


def _nonempty_adj(graph: DisymGraph, symbol: str | None) -> list[str] | None:
    if symbol is None:
        return None
    adjacent = graph.adj(symbol)
    return adjacent or None


class Acl:
    """Queryable allow/deny rules for role, resource and privilege combinations.

    The base rule is "deny every privilege to every role on every resource".
    """

    def __init__(self) -> None:
        self._roles = DisymGraph()
        self._resources = DisymGraph()
        self._rules = ResourceRoleRules()

    def __repr__(self) -> str:
        return (
            f"Acl(roles={self._roles!r}, resources={self._resources!r}, "
            f"rules={self._rules!r})"
        )

    def role_count(self) -> int:
        """Return the number of roles."""
        return self._roles.vert_count()

    def resource_count(self) -> int:
        """Return the number of resources."""
        return self._resources.vert_count()

    def add_role(self, role: str, parents: Sequence[str] | None = None) -> "Acl":
        """Add ``role``, inheriting from ``parents``; unknown parents are added too."""
        if parents is not None:
            self._roles.add_edge(role, parents)
        self._roles.add_vertex(role)
        return self

    def has_role(self, role: str) -> bool:
        """Return whether ``role`` has been added."""
        return self._roles.has_vertex(role)

    def inherits_role(self, role: str, inherits: str) -> bool:
        """Return whether ``role`` inherits ``inherits``.

        Raises ``ValueError`` if either role is unknown.
        """
        return _inherits(self._roles, role, inherits)

    def add_resource(self, resource: str, parents: Sequence[str] | None = None) -> "Acl":
        """Add ``resource``, inheriting from ``parents``; unknown parents are added too."""
        if parents is not None:
            self._resources.add_edge(resource, parents)
        self._resources.add_vertex(resource)
        return self

    def has_resource(self, resource: str) -> bool:
        """Return whether ``resource`` has been added."""
        return self._resources.contains(resource)

    def inherits_resource(self, resource: str, inherits: str) -> bool:
        """Return whether ``resource`` inherits ``inherits``.

        Raises ``ValueError`` if either resource is unknown.
        """
        return _inherits(self._resources, resource, inherits)

    def allow(
        self,
        roles: Sequence[str] | None = None,
        resources: Sequence[str] | None = None,
        privileges: Sequence[str] | None = None,
    ) -> "Acl":
        """Set the allow rule for the given combinations.

        ``None`` or an empty list of roles or resources means "all"; ``None``
        privileges means every privilege. Unknown roles and resources are ignored.
        """
        return self._add_rule(Rule.ALLOW, roles, resources, privileges)

    def deny(
        self,
        roles: Sequence[str] | None = None,
        resources: Sequence[str] | None = None,
        privileges: Sequence[str] | None = None,
    ) -> "Acl":
        """Set the deny rule for the given combinations."""
        return self._add_rule(Rule.DENY, roles, resources, privileges)

    def is_allowed(
        self,
        role: str | None = None,
        resource: str | None = None,
        privilege: str | None = None,
    ) -> bool:
        """Return whether ``role`` has ``privilege`` on ``resource``.

        ``None`` for any argument checks the "all" rule for it. Roles and
        resources that are inherited directly are checked before the given ones.
        """
        inherited_roles = _nonempty_adj(self._roles, role)
        inherited_resources = _nonempty_adj(self._resources, resource)

        if inherited_resources and inherited_roles:
            found = any(
                self._is_directly_allowed(r, res, privilege)
                for res in reversed(inherited_resources)
                for r in reversed(inherited_roles)
            )
        elif inherited_roles:
            found = any(
                self._is_directly_allowed(r, resource, privilege)
                for r in reversed(inherited_roles)
            )
        elif inherited_resources:
            found = any(
                self._is_directly_allowed(role, res, privilege)
                for res in reversed(inherited_resources)
            )
        else:
            found = False
        return found or self._is_directly_allowed(role, resource, privilege)

    def is_allowed_any(
        self,
        roles: Sequence[str] | None = None,
        resources: Sequence[str] | None = None,
        privileges: Sequence[str] | None = None,
    ) -> bool:
        """Return whether any given role, resource and privilege combination is allowed."""
        resource_options = _filter_options(self.has_resource, resources)
        role_options = _filter_options(self.has_role, roles)
        privilege_options = _filter_options(lambda _: True, privileges)
        return any(
            self.is_allowed(role, resource, privilege)
            for resource in resource_options
            for role in role_options
            for privilege in privilege_options
        )

    def _is_directly_allowed(
        self, role: str | None, resource: str | None, privilege: str | None
    ) -> bool:
        rule = (
            self._rules.get_role_privilege_rules(resource)
            .get_privilege_rules(role)
            .get_rule(privilege)
        )
        return rule is Rule.ALLOW

    def _role_rules_for(self, resource: str | None, role: str | None) -> PrivilegeRules:
        if resource is None:
            role_rules = self._rules.for_all_resources
        else:
            role_rules = self._rules.by_resource_id.setdefault(
                resource, RolePrivilegeRules(False)
            )
        if role is None:
            return role_rules.for_all_roles
        if role_rules.by_role_id is None:
            role_rules.by_role_id = {}
        return role_rules.by_role_id.setdefault(role, PrivilegeRules(False))

    def _add_rule(
        self,
        rule: Rule,
        roles: Sequence[str] | None,
        resources: Sequence[str] | None,
        privileges: Sequence[str] | None,
    ) -> "Acl":
        role_keys = _keys_in_graph(self._roles, roles)
        resource_keys = _keys_in_graph(self._resources, resources)
        for resource in resource_keys:
            for role in role_keys:
                role_rules = self._role_rules_for(resource, role)
                if privileges is None:
                    role_rules.for_all_privileges = rule
                    continue
                for privilege in privileges:
                    if role_rules.by_privilege_id is None:
                        role_rules.by_privilege_id = {}
                    role_rules.by_privilege_id[privilege] = rule
        return self


def _filter_options(
    pred: Callable[[str], bool], items: Sequence[str] | None
) -> list[str | None]:
    """Return the items passing ``pred``, or ``[None]`` when no items are given."""
    if not items:
        return [None]
    return [item for item in items if pred(item)]


def _keys_in_graph(graph: DisymGraph, items: Sequence[str] | None) -> list[str | None]:
    """Return the items present in ``graph``, or ``[None]`` when no items are given."""
    if not items:
        return [None]
    return [item for item in items if graph.has_vertex(item)]