# walrs

Small building blocks for access control, with no third-party dependencies:

- `walrs.digraph.Digraph`: a directed graph over integer vertices, with in/out degrees and reversal.
- `walrs.symbol_digraph.DisymGraph`: a directed graph whose vertices are strings, backed by a `Digraph`.
- `walrs.dfs.DigraphDFS` and `walrs.dipaths_dfs.DigraphDipathsDFS`: depth-first reachability and paths.
- `walrs.rules`: the nested allow/deny tables (`Rule`, `PrivilegeRules`, `RolePrivilegeRules`, `ResourceRoleRules`).
- `walrs.acl.Acl`: an access control list of roles, resources and privileges, where roles and resources inherit from their parents.
- `walrs.acl_data.AclData` and `walrs.acl_data.load_acl`: describe an `Acl` as plain data and build it from JSON.
- `walrs.utils`: `triangular_num` and `extract_vert_and_edge_counts`.

## Installing

```
pip install .
```

Install `.[test]` to get pytest as well, then run `pytest`.

## Access control lists

The base rule denies every privilege to every role on every resource. The rules you add open or close access from there.

```python
from walrs.acl import Acl

acl = Acl()
acl.add_role("guest", None)
acl.add_role("user", ["guest"])      # user inherits from guest
acl.add_role("admin", ["user"])

acl.add_resource("index", None)
acl.add_resource("blog", ["index"])
acl.add_resource("account", None)

acl.allow(["guest"], ["index", "blog"], ["index", "read"])
acl.allow(["user"], ["account"], ["index", "read", "update"])
acl.allow(["admin"], None, None)     # every privilege on every resource

assert acl.is_allowed("guest", "index", "index")
assert not acl.is_allowed("guest", "index", None)
assert acl.is_allowed("user", "index", "index")
assert acl.is_allowed("admin", None, None)
assert acl.inherits_role("admin", "guest")
```

- `add_role` and `add_resource` also add any parents that are not yet known, and return the `Acl` so calls can be chained.
- For `allow` and `deny`, `None` or an empty list of roles or resources means "all of them"; `None` for privileges means every privilege.
- Role and resource names that the ACL does not know about are skipped when rules are added.
- `is_allowed` checks the roles and resources that the given ones inherit from directly, then the given combination itself. `None` for an argument checks the "all" rule for it.
- `is_allowed_any` returns whether any combination of the given roles, resources and privileges is allowed.
- `inherits_role` and `inherits_resource` raise `ValueError` for unknown names.

## Loading from JSON

```python
from walrs.acl_data import load_acl

acl = load_acl("acl.json")
```

The document may hold the keys `roles`, `resources`, `allow` and `deny`, each a list or `null`:

```json
{
  "roles": [["guest", null], ["user", ["guest"]], ["admin", ["user"]]],
  "resources": [["index", null], ["account", null]],
  "allow": [
    ["index", [["guest", ["index", "read"]]]],
    ["account", [["user", null]]]
  ]
}
```

`roles` and `resources` hold `[name, parents]` pairs. Each `allow` entry names a resource and lists `[role, privileges]` pairs; a `null` privilege list means every privilege, and a `null` list of pairs allows every role every privilege on that resource.

`AclData.from_dict` and `AclData.from_file` check the shape of the document and raise `ValueError` on malformed input; `AclData.to_acl` builds the `Acl`.

## Graphs

```python
from walrs.symbol_digraph import DisymGraph
from walrs.dipaths_dfs import DigraphDipathsDFS

g = DisymGraph()
g.add_edge("a", ["b", "c"])
g.add_edge("b", ["c"])

paths = DigraphDipathsDFS(g.graph(), g.index("a"))
assert paths.has_path_to(g.index("c"))
assert g.adj("a") == ["b", "c"]
```

`path_to(v)` returns the path from `v` back to the source vertex, or `None` if `v` is unreachable. Out-of-range vertices raise `IndexError`.

`Digraph.from_reader` reads a text stream whose first two lines are the vertex and edge counts and whose remaining lines are `v w` edge pairs. `DisymGraph.from_reader` reads lines of whitespace-separated names: the first name on a line is the source vertex and the rest are its targets. Blank lines are skipped by both.

## What it does not do

- `deny` entries in a JSON document are parsed into `AclData.deny` but are not applied by `to_acl`.
- Rules cannot be removed once added; only overwritten by a later `allow` or `deny`.
- There is no command-line tool and no persistence: an `Acl` lives in memory and is built either in code or from JSON.