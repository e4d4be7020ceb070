"""Change list for a brand new Clarity project.

``ProjectChangesBuilder`` turns ``(project_path, project_name,
telemetry_enabled)`` into the ordered list of directories and files that make
up a fresh Clarinet project.  It performs no I/O: the result is handed to
:func:`src.scaffolder.executor.apply_changes` (or printed, for a dry run).

Order is significant.  The root directory comes first, and every directory
precedes the files created inside it.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from rich.markup import escape

from src.utils import green

from .changes import Change, DirectoryCreation, FileCreation
from .devnet import DEFAULT_DEPLOYMENT_FEE_RATE, DEVNET_ACCOUNTS, STACKING_ORDERS, get_account
from .templates import TemplateRenderer


TESTNET_RPC_ADDRESS = "https://stacks-node-api.testnet.stacks.co"
MAINNET_RPC_ADDRESS = "https://stacks-node-api.mainnet.stacks.co"


class ScaffoldError(Exception):
    """Raised when a project change list cannot be produced."""


class OptionalDirectory(str, Enum):
    """Auxiliary top-level directories that are only created on request."""

    CLIENTS = "clients"
    NOTEBOOKS = "notebooks"
    SCRIPTS = "scripts"


class ProjectChangesBuilder:
    """Builds the ordered change list for a new project.

    Instances are single use: :meth:`run` may be called once.

    Attributes:
        project_path: Parent directory of the new project.
        project_name: Name of the project directory (and of the project in
            ``Clarinet.toml``).
        telemetry_enabled: Value of ``telemetry`` in ``Clarinet.toml``.
        optional_directories: Auxiliary directories to add after ``tests/``.
    """

    def __init__(
        self,
        project_path: str,
        project_name: str,
        telemetry_enabled: bool,
        optional_directories: Iterable[OptionalDirectory | str] = (),
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.project_path = str(project_path)
        self.project_name = project_name
        self.telemetry_enabled = telemetry_enabled
        self.optional_directories = frozenset(
            OptionalDirectory(d) for d in optional_directories
        )
        self.renderer = renderer or TemplateRenderer()
        self.changes: list[Change] = []
        self._consumed = False

    # -- Public API --------------------------------------------------------

    def run(self) -> list[Change]:
        """Produce the change list.

        Returns:
            The ordered list of changes.

        Raises:
            ScaffoldError: If the builder has already been run.  This is the
                only failure path; building the list itself cannot fail.
        """
        if self._consumed:
            raise ScaffoldError("ProjectChangesBuilder.run() may only be called once")
        self._consumed = True

        self._create_root_directory()
        self._create_subdirectory("contracts")
        self._create_subdirectory("settings")
        self._create_subdirectory("tests")
        self._create_optional_directories()
        self._create_clarinet_toml()
        self._create_network_toml("testnet", TESTNET_RPC_ADDRESS)
        self._create_network_toml("mainnet", MAINNET_RPC_ADDRESS)
        self._create_devnet_toml()
        self._create_subdirectory(".vscode")
        self._create_file(".vscode", "settings.json", "vscode/settings.json.j2")
        self._create_file(".vscode", "tasks.json", "vscode/tasks.json.j2")
        self._create_file(None, ".gitignore", "gitignore.j2")
        return list(self.changes)

    # -- Directories -------------------------------------------------------

    def _create_root_directory(self) -> None:
        self.changes.append(
            DirectoryCreation(
                comment=f"{green('Created directory')} {escape(self.project_name)}",
                name=self.project_name,
                path=f"{self.project_path}/{self.project_name}",
            )
        )

    def _create_subdirectory(self, name: str) -> None:
        relative = f"{self.project_name}/{name}"
        self.changes.append(
            DirectoryCreation(
                comment=f"{green('Created directory')} {escape(relative)}",
                name=name,
                path=f"{self.project_path}/{relative}",
            )
        )

    def _create_optional_directories(self) -> None:
        # Enum declaration order, not caller order, keeps output deterministic.
        for directory in OptionalDirectory:
            if directory in self.optional_directories:
                self._create_subdirectory(directory.value)

    # -- Files -------------------------------------------------------------

    def _create_file(
        self,
        subdirectory: str | None,
        name: str,
        template: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        parts = [self.project_name]
        if subdirectory:
            parts.append(subdirectory)
        parts.append(name)
        relative = "/".join(parts)

        self.changes.append(
            FileCreation(
                comment=f"{green('Created file')} {escape(relative)}",
                name=name,
                content=self.renderer.render(template, context or {}),
                path=f"{self.project_path}/{relative}",
            )
        )

    def _create_clarinet_toml(self) -> None:
        self._create_file(
            None,
            "Clarinet.toml",
            "Clarinet.toml.j2",
            {
                "project_name": self.project_name,
                "telemetry_enabled": self.telemetry_enabled,
            },
        )

    def _create_network_toml(self, network: str, rpc_address: str) -> None:
        self._create_file(
            "settings",
            f"{network.capitalize()}.toml",
            "settings/network.toml.j2",
            {
                "network": network,
                "rpc_address": rpc_address,
                "deployment_fee_rate": DEFAULT_DEPLOYMENT_FEE_RATE,
            },
        )

    def _create_devnet_toml(self) -> None:
        self._create_file(
            "settings",
            "Devnet.toml",
            "settings/Devnet.toml.j2",
            {
                "deployment_fee_rate": DEFAULT_DEPLOYMENT_FEE_RATE,
                "accounts": DEVNET_ACCOUNTS,
                "stacking_orders": STACKING_ORDERS,
                "miner": get_account("deployer"),
                "faucet": get_account("faucet"),
                "hyperchain_leader": get_account("wallet_8"),
            },
        )


def get_changes_for_new_project(
    project_path: str,
    project_name: str,
    telemetry_enabled: bool,
    optional_directories: Iterable[OptionalDirectory | str] = (),
) -> list[Change]:
    """Return the change list for a new project in one call."""
    builder = ProjectChangesBuilder(
        project_path,
        project_name,
        telemetry_enabled,
        optional_directories=optional_directories,
    )
    return builder.run()
