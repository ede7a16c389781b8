# kcmutils

Small helpers with no dependencies for controllers that manage clusters
and their Helm-based templates. Kubernetes objects are handled as plain
dictionaries in the shape of their JSON form (`apiVersion`, `kind`,
`metadata`, `status`, ...).

## Installation

```
pip install kcmutils
```

To run the test suite as well:

```
pip install "kcmutils[test]"
```

## Modules

### `kcmutils.helm`

- `RegistryType`: a string enum with the members `OCI` (`"oci"`) and
  `DEFAULT` (`"default"`).
- `determine_default_repository_type(default_registry_url)` returns
  `RegistryType.OCI` for an `oci://` URL and `RegistryType.DEFAULT` for
  `http://` and `https://`. Any other scheme, or a string with no scheme,
  raises `ValueError`.

### `kcmutils.release`

- `release_name_from_version(version)` drops one leading `v` and turns
  dots into dashes behind a `kcm-` prefix: `"v0.0.1"` gives `"kcm-0-0-1"`
  and `"v0.0.1-rc"` gives `"kcm-0-0-1-rc"`.
- `templates_chart_from_release_name(release_name)` appends `-tpl`.

### `kcmutils.labels`

- `add_label(obj, label_key, label_value)` sets `metadata.labels[key]`
  on the object, creating `metadata` and `labels` where missing. It
  returns `False` when the label already had that value and `True` when
  it changed something.

### `kcmutils.kube`

- `DEFAULT_SYSTEM_NAMESPACE` is `"kcm-system"`.
- `GroupVersionKind(group, version, kind)`, a frozen dataclass;
  `api_version()` gives `"group/version"`, or just the version when the
  group is empty.
- `current_namespace(service_account_path=SERVICE_ACCOUNT_NAMESPACE_PATH)`
  returns `POD_NAMESPACE` from the environment if it is set, else the
  contents of the service account namespace file if it can be read and is
  not empty, else `"kcm-system"`.
- `add_owner_reference(dependent, owner)` appends an entry built from the
  owner's `apiVersion`, `kind`, `metadata.name` and `metadata.uid` to the
  dependent's `metadata.ownerReferences`, unless a reference with the same
  UID is already there. It returns whether the dependent changed.
- `ensure_delete_all_of(client, gvk, list_options=None)` calls
  `client.list(gvk, list_options)` and, for every listed object that has
  no `metadata.deletionTimestamp`, `client.delete(obj)`. A `NotFoundError`
  from `delete` is ignored. It returns only when the list is empty;
  otherwise it raises `DeletionPendingError`, whose `errors` attribute
  holds one "waiting for <Kind> <namespace>/<name> removal" error for each
  object still present and each other exception `delete` raised.
- `NotFoundError`: what a client raises for a missing object.

### `kcmutils.status`

- `Condition`: a dataclass with `type`, `status`, `observed_generation`,
  `last_transition_time` (a `datetime` or `None`), `reason` and `message`.
- `GroupVersionResource(group, version, resource)`, a frozen dataclass.
- `obj_kind_name(obj)` returns the `(kind, name)` of an object, empty
  strings where missing.
- `conditions_from_unstructured(obj)` reads `status.conditions` into
  `Condition` objects, prefixing each message with the object's name
  (`"name: message"`, or just the name when the message is empty). Missing
  or malformed conditions raise `ValueError`.
- `get_resource_conditions(namespace, dynamic_client, gvr, label_selector)`
  calls `dynamic_client.list(gvr, namespace, label_selector)` and gathers
  the conditions of every object into a `ResourceConditions(kind, name,
  conditions)`, with the kind and name taken from the first object. When
  the list is empty, or the client raises `NotFoundError`, it raises
  `ResourceNotFoundError`, whose `resource` attribute names the resource.
  Other client errors are raised as `RuntimeError`.

## Example

```python
from kcmutils.helm import determine_default_repository_type, RegistryType
from kcmutils.release import release_name_from_version
from kcmutils.status import conditions_from_unstructured

assert determine_default_repository_type("oci://registry:5000/charts") is RegistryType.OCI
assert release_name_from_version("v0.0.1-rc") == "kcm-0-0-1-rc"

cluster = {
    "kind": "Cluster",
    "metadata": {"name": "dev"},
    "status": {"conditions": [{"type": "Ready", "status": "True", "message": "ok"}]},
}
for condition in conditions_from_unstructured(cluster):
    print(condition.type, condition.status, condition.message)  # Ready True dev: ok
```

## What it does not do

The package does not talk to a Kubernetes API server and ships no client.
`ensure_delete_all_of` and `get_resource_conditions` work through a
client object that you pass in, which only needs the `list` (and, for
deletion, `delete`) methods described above. There is no command-line
tool and no controller to run.

## Tests

```
pytest
```