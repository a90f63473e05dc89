"""Client operations for Rollbar teams."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable

import requests

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.rollbar.com"

PATH_TEAM_CREATE = "/api/1/teams"
PATH_TEAM_LIST = "/api/1/teams"
PATH_TEAM_READ = "/api/1/team/{team_id}"
PATH_TEAM_DELETE = "/api/1/team/{team_id}"
PATH_TEAM_USER = "/api/1/team/{team_id}/user/{user_id}"
PATH_TEAM_PROJECT = "/api/1/team/{team_id}/project/{project_id}"

SYSTEM_TEAM_NAMES = frozenset({"Everyone", "Owners"})


class ApiError(Exception):
    """An error reported by the Rollbar API."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error {status_code}: {message}" if message else f"API error {status_code}")


class NotFoundError(ApiError):
    """The requested object was not found."""

    def __init__(self, status_code: int = 404, message: str = "not found") -> None:
        super().__init__(status_code, message)


@dataclass(frozen=True)
class Team:
    """A Rollbar team."""

    id: int = 0
    account_id: int = 0
    name: str = ""
    access_level: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(
            id=int(data.get("id") or 0),
            account_id=int(data.get("account_id") or 0),
            name=data.get("name") or "",
            access_level=data.get("access_level") or "",
        )


def filter_system_teams(teams: Iterable[Team]) -> list[Team]:
    """Return the teams other than the system teams "Everyone" and "Owners"."""
    return [t for t in teams if t.name not in SYSTEM_TEAM_NAMES]


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("message") or "")
    return ""


class TeamClient:
    """Talks to the Rollbar API about teams."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, token: str = "") -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update(
            {"X-Rollbar-Access-Token": token, "Content-Type": "application/json"}
        )
        self._lock = threading.Lock()

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        return self.session.request(method, self.base_url + path, **kwargs)

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        code = resp.status_code
        if 200 <= code < 300:
            return
        message = _error_message(resp)
        if code == 404:
            raise NotFoundError(code, message or "not found")
        raise ApiError(code, message)

    def create_team(self, name: str, level: str) -> Team:
        """Create a new team."""
        with self._lock:
            log.debug("Creating new team name=%s access_level=%s", name, level)
            if not name:
                raise ValueError("name cannot be blank")
            resp = self._request(
                "POST", PATH_TEAM_CREATE, json={"name": name, "access_level": level}
            )
            self._raise_for_status(resp)
            team = Team.from_dict(resp.json().get("result") or {})
            log.debug("Successfully created new team id=%d", team.id)
            return team

    def list_teams(self) -> list[Team]:
        """List all teams."""
        with self._lock:
            log.debug("Listing all teams")
            resp = self._request("GET", PATH_TEAM_LIST)
            self._raise_for_status(resp)
            teams = [Team.from_dict(d) for d in resp.json().get("result") or []]
            log.debug("Successfully listed teams count=%d", len(teams))
            return teams

    def list_custom_teams(self) -> list[Team]:
        """List all teams except the system teams "Everyone" and "Owners"."""
        teams = filter_system_teams(self.list_teams())
        log.debug("Successfully listed custom teams count=%d", len(teams))
        return teams

    def read_team(self, team_id: int) -> Team:
        """Read one team; raises NotFoundError if it does not exist."""
        with self._lock:
            log.debug("Reading team id=%d", team_id)
            if team_id == 0:
                raise ValueError("id must be non-zero")
            resp = self._request("GET", PATH_TEAM_READ.format(team_id=team_id))
            self._raise_for_status(resp)
            team = Team.from_dict(resp.json().get("result") or {})
            log.debug("Successfully read team id=%d name=%s", team.id, team.name)
            return team

    def delete_team(self, team_id: int) -> None:
        """Delete a team; raises NotFoundError if it does not exist."""
        with self._lock:
            log.debug("Deleting team id=%d", team_id)
            if team_id == 0:
                raise ValueError("id must be non-zero")
            resp = self._request("DELETE", PATH_TEAM_DELETE.format(team_id=team_id))
            self._raise_for_status(resp)
            log.debug("Successfully deleted team id=%d", team_id)

    def assign_user_to_team(self, team_id: int, user_id: int) -> None:
        """Assign a user to a team."""
        with self._lock:
            log.debug("Assigning user %d to team %d", user_id, team_id)
            resp = self._request(
                "PUT", PATH_TEAM_USER.format(team_id=team_id, user_id=user_id)
            )
            # The API answers 403 when the team or user does not exist.
            if resp.status_code == 403:
                raise NotFoundError(403, _error_message(resp) or "team or user not found")
            self._raise_for_status(resp)
            log.debug("Successfully assigned user to team")

    def is_user_assigned_to_team(self, team_id: int, user_id: int) -> bool:
        """Tell whether a user is a member of a team."""
        with self._lock:
            log.debug("Checking if user %d is assigned to team %d", user_id, team_id)
            resp = self._request(
                "GET", PATH_TEAM_USER.format(team_id=team_id, user_id=user_id)
            )
            if resp.status_code == 404:
                log.debug("User is not assigned to the team")
                return False
            self._raise_for_status(resp)
            return True

    def remove_user_from_team(self, user_id: int, team_id: int) -> None:
        """Remove a user from a team."""
        with self._lock:
            log.debug("Removing user %d from team %d", user_id, team_id)
            resp = self._request(
                "DELETE", PATH_TEAM_USER.format(team_id=team_id, user_id=user_id)
            )
            # The API answers 422 when the team or user does not exist.
            if resp.status_code == 422:
                raise NotFoundError(422, _error_message(resp) or "team or user not found")
            self._raise_for_status(resp)
            log.debug("Successfully removed user from team")

    def find_team_id(self, name: str) -> int:
        """Return the ID of the team with the given name."""
        for team in self.list_teams():
            if team.name == name:
                log.debug("Found team ID %d for %s", team.id, name)
                return team.id
        raise NotFoundError(404, f"no team named {name!r}")

    def assign_team_to_project(self, team_id: int, project_id: int) -> None:
        """Assign a team to a project."""
        with self._lock:
            log.debug("Assigning team %d to project %d", team_id, project_id)
            resp = self._request(
                "PUT", PATH_TEAM_PROJECT.format(team_id=team_id, project_id=project_id)
            )
            self._raise_for_status(resp)

    def remove_team_from_project(self, team_id: int, project_id: int) -> None:
        """Remove a team from a project."""
        with self._lock:
            log.debug("Removing team %d from project %d", team_id, project_id)
            resp = self._request(
                "DELETE", PATH_TEAM_PROJECT.format(team_id=team_id, project_id=project_id)
            )
            self._raise_for_status(resp)