# rollbarteams

A small client library for managing Rollbar teams through the Rollbar API.
It creates, lists, reads and deletes teams, manages team membership, and
grants or revokes a team's access to projects.

The package depends on `requests` and supports Python 3.10 and later. The
test suite uses `pytest` and `responses`, available through the `test` extra.

## Usage

Everything lives in the `rollbarteams.team` module.

```python
from rollbarteams.team import TeamClient, NotFoundError, DEFAULT_BASE_URL

client = TeamClient(DEFAULT_BASE_URL, token="token")

team = client.create_team("backend", "standard")
print(team.id, team.account_id, team.name, team.access_level)

for t in client.list_custom_teams():   # excludes "Everyone" and "Owners"
    print(t.name)

client.assign_user_to_team(team.id, 238101)
assert client.is_user_assigned_to_team(team.id, 238101)
client.remove_user_from_team(238101, team.id)

client.assign_team_to_project(team.id, 423092)
client.remove_team_from_project(team.id, 423092)

try:
    client.read_team(999)
except NotFoundError:
    print("no such team")

client.delete_team(team.id)
```

`TeamClient(base_url, token)` sends every request with the token in the
`X-Rollbar-Access-Token` header. `base_url` defaults to `DEFAULT_BASE_URL`
(`https://api.rollbar.com`). Calls on one client are serialised by a lock, so
a client may be shared between threads.

### Operations

- `create_team(name, level)` – create a team with the given access level and
  return it as a `Team`. A blank name raises `ValueError`.
- `list_teams()` – every team on the account, as a list of `Team`.
- `list_custom_teams()` – every team except the system teams "Everyone" and
  "Owners".
- `read_team(team_id)` – one team. An id of zero raises `ValueError`.
- `delete_team(team_id)` – delete a team. An id of zero raises `ValueError`.
- `find_team_id(name)` – the id of the team with that name; raises
  `NotFoundError` if there is none.
- `assign_user_to_team(team_id, user_id)` – add a user to a team. The API's
  403 answer for an unknown team or user is raised as `NotFoundError`.
- `is_user_assigned_to_team(team_id, user_id)` – `True` if the user is a
  member, `False` if the API answers 404.
- `remove_user_from_team(user_id, team_id)` – note the argument order. The
  API's 422 answer for an unknown team or user is raised as `NotFoundError`.
- `assign_team_to_project(team_id, project_id)` and
  `remove_team_from_project(team_id, project_id)` – project access.
- `filter_system_teams(teams)` – a module-level function that drops
  "Everyone" and "Owners" from any iterable of `Team`.

`Team` is a frozen dataclass with the fields `id`, `account_id`, `name` and
`access_level`; `Team.from_dict` builds one from an API result object.

### Errors

Any answer outside the 2xx range is raised as `ApiError`, which carries the
`status_code` and the `message` from the response body. A 404 answer, and the
not-found cases listed above, are raised as `NotFoundError`, a subclass of
`ApiError`. Network failures surface as the exceptions `requests` raises.

### Logging

The client logs its progress at debug level through the standard `logging`
module, on the logger named `rollbarteams.team`.

## What this package does not do

It covers teams only. It does not manage projects, project access tokens,
users, invitations, notifications or integrations, and it offers no
command-line tool.