#!/usr/bin/env python3
"""
YNAB API Client

Thin wrapper over the YNAB v1 REST API covering the three calls the split
poster needs: list budgets, list accounts, and create a transaction.

Failures of any kind (transport, HTTP status, malformed body) surface as
RemoteError. Nothing is retried: creating a transaction is not idempotent,
so a blind retry could post it twice.
"""

import logging
from typing import Any

import requests

from ..core.config import DEFAULT_YNAB_BASE_URL
from ..core.errors import ConfigurationError, RemoteError
from .models import NewTransaction, YnabAccount, YnabBudget

logger = logging.getLogger(__name__)


class YnabClient:
    """
    YNAB API client authenticated with a personal access token.

    Args:
        api_token: YNAB personal access token
        base_url: API root (default: https://api.ynab.com/v1)
        timeout: Per-request timeout in seconds
        session: Optional requests.Session, injectable for tests
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_YNAB_BASE_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        if not api_token:
            raise ConfigurationError("Undefined YNAB_ACCESS_TOKEN")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/json",
            }
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "YnabClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, json_body: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Perform one API call and return the response's "data" object.

        Raises:
            RemoteError: On transport failure, non-2xx status or unexpected body
        """
        url = f"{self.base_url}{path}"
        logger.debug("YNAB %s %s", method, path)

        try:
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteError(f"YNAB request {method} {path} failed: {e}") from e

        if not response.ok:
            raise RemoteError(
                f"YNAB request {method} {path} failed",
                status_code=response.status_code,
                detail=_error_detail(response),
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteError(
                f"YNAB returned a non-JSON response for {method} {path}",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            raise RemoteError(
                f"YNAB response for {method} {path} has no data object",
                status_code=response.status_code,
            )

        return payload["data"]

    def list_budgets(self) -> list[YnabBudget]:
        """
        List the budgets visible to the token.

        Returns:
            List of YnabBudget in API order

        Raises:
            RemoteError: If the call fails or a budget lacks its id or name
        """
        data = self._request("GET", "/budgets")
        try:
            budgets = [YnabBudget.from_dict(budget) for budget in data.get("budgets", [])]
        except (KeyError, TypeError) as e:
            raise RemoteError(f"Unexpected YNAB response for GET /budgets: {e!r}") from e
        logger.info("Fetched %d budgets", len(budgets))
        return budgets

    def list_accounts(self, budget_id: str) -> list[YnabAccount]:
        """
        List all accounts of a budget, including closed and deleted ones.

        Args:
            budget_id: YNAB budget id

        Returns:
            List of YnabAccount in API order

        Raises:
            RemoteError: If the call fails or an account lacks its id or name
        """
        data = self._request("GET", f"/budgets/{budget_id}/accounts")
        try:
            accounts = [YnabAccount.from_dict(account) for account in data.get("accounts", [])]
        except (KeyError, TypeError) as e:
            raise RemoteError(
                f"Unexpected YNAB response for GET /budgets/{budget_id}/accounts: {e!r}"
            ) from e
        logger.info("Fetched %d accounts for budget %s", len(accounts), budget_id)
        return accounts

    def create_transaction(self, budget_id: str, transaction: NewTransaction) -> dict[str, Any]:
        """
        Create one transaction (with its subtransactions) in a single call.

        Args:
            budget_id: YNAB budget id
            transaction: Transaction to post

        Returns:
            The created transaction as returned by YNAB (the receipt)
        """
        data = self._request(
            "POST",
            f"/budgets/{budget_id}/transactions",
            json_body={"transaction": transaction.to_api_dict()},
        )
        created: dict[str, Any] = data.get("transaction") or {}
        logger.info(
            "Created transaction %s with %d subtransactions",
            created.get("id", "unknown"),
            len(transaction.subtransactions),
        )
        return created


def _error_detail(response: requests.Response) -> str | None:
    """Extract YNAB's error.detail (or the raw text) from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] if text else None

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        error = payload["error"]
        return error.get("detail") or error.get("name")
    return None
