# civoapi

A small Python client for parts of the Civo cloud API: SSH keys, teams and
team members, user records, block storage volumes and webhooks. It uses only
the standard library.

## Installing

```
pip install civoapi
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "civoapi[test]"
pytest
```

## How it is organised

Each resource has its own module, with frozen dataclasses for the records the
API returns and, where the API offers calls for it, a service class:

| Module              | Records                                  | Service          |
|---------------------|------------------------------------------|------------------|
| `civoapi.ssh_keys`  | `SSHKey`                                 | `SSHKeyService`  |
| `civoapi.teams`     | `Team`, `TeamMember`                     | `TeamService`    |
| `civoapi.users`     | `User`                                   |                  |
| `civoapi.volumes`   | `Volume`, `VolumeResult`, `VolumeConfig` | `VolumeService`  |
| `civoapi.webhooks`  | `Webhook`, `WebhookConfig`               | `WebhookService` |

Services are built on a transport. `civoapi.core.HttpTransport` sends JSON
requests with `request(method, path, body)`, adds a bearer `Authorization`
header from the API key, and returns the decoded JSON reply (or `None` for an
empty body). HTTP and connection failures, and replies that are not JSON,
raise `civoapi.core.CivoError`; for HTTP errors its `status` holds the code.
Any object with the same `request` method can stand in for the transport,
which makes services easy to drive from tests.

```python
from civoapi.core import HttpTransport
from civoapi.volumes import VolumeConfig, VolumeService

transport = HttpTransport(api_key="placeholder", region="lon1")
volumes = VolumeService(transport)

result = volumes.create(VolumeConfig(name="data", size_gigabytes=25))
volumes.attach(result.id, "instance-id")
```

Records are built from API payloads with `from_dict`; a payload of the wrong
shape raises `CivoError`. `VolumeConfig` and `WebhookConfig` turn themselves
into request bodies with `to_dict`. Timestamps are parsed with
`civoapi.core.parse_time`, which accepts RFC 3339 text and returns `None` for
empty values.

Calls that only report an outcome (deleting a key, resizing, attaching or
detaching a volume, removing a team member and so on) return a
`civoapi.core.SimpleResponse` with `id` and `result`.

## The services

- `SSHKeyService`: `list`, `create(name, public_key)`, `update(name, ssh_key_id)`,
  `find(search)`, `delete(key_id)`.
- `TeamService`: `list`, `create(name)`, `find(search)`, `rename(team_id, name)`,
  `delete(team_id)`, `list_members(team_id)`,
  `add_member(team_id, user_id, permissions, roles)` (returns the team's
  members afterwards), `update_member(team_id, member_id, permissions, roles)`,
  `remove_member(team_id, member_id)`.
- `VolumeService`: `list`, `get(volume_id)`, `find(search)`,
  `for_cluster(cluster_id)`, `dangling(cluster_ids)`, `create(config)`,
  `resize(volume_id, size)`, `attach(volume_id, instance_id)`,
  `detach(volume_id)`, `delete(volume_id)`. Resize, attach and detach send
  the transport's `region`.
- `WebhookService`: `create(config)`, `list`, `find(search)`,
  `update(webhook_id, config)`, `delete(webhook_id)`.

## Finding things by name or ID

The `find` methods accept part of a name (or of the URL, for webhooks) or part
of an ID. An exact match always wins; otherwise a single partial match is
returned. Several partial matches raise `MultipleMatchesError`, and none at
all raises `ZeroMatchesError`; both derive from `CivoError`:

```python
from civoapi.core import MultipleMatchesError, ZeroMatchesError

try:
    key = ssh_keys.find("laptop")
except MultipleMatchesError as exc:
    print(exc)   # MultipleMatchesError: unable to find laptop because there were multiple matches
except ZeroMatchesError as exc:
    print(exc)   # ZeroMatchesError: unable to find laptop, zero matches
```

Team lookups name the team in the message, for example
`ZeroMatchesError: unable to find ops team, zero matches`.

The same rule is available on its own as
`civoapi.core.find_match(items, search, fields, label)`.

## Volumes and clusters

`VolumeService.for_cluster(cluster_id)` lists the volumes whose `cluster_id`
equals the given ID. `VolumeService.dangling(cluster_ids)` lists volumes that
name a cluster not among the given IDs — handy for clean-up jobs. You supply
the cluster IDs yourself.

## Helpers

Generate a friendly "adjective-noun" name for a new instance or cluster; pass
a `random.Random` for repeatable results:

```python
import random
from civoapi.names import random_name

print(random_name(random.Random(7)))   # something like "misty-river"
```

`civoapi.version.get_version()` returns the installed version of the
package, or `"dev"` when it is not installed.

## What it does not do

- It has no calls for Kubernetes clusters: `for_cluster` and `dangling`
  only filter volumes by the cluster IDs you give them.
- `User` is a record type only; there is no service for fetching users or
  their accounts, organisations and roles.
- There is no command-line tool; it is a library only.