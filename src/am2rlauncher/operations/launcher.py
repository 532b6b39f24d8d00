"""Opening URLs and folders in the user's desktop applications."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Union

from am2rlauncher.bootstrap.platform import PlatformCapabilities, PlatformKind
from am2rlauncher.core.logging import get_logger
from am2rlauncher.core.process import (
    ProcessInvocationSpec,
    open_with_shell,
    start_process,
)

LOGGER = get_logger(__name__)

Starter = Callable[[ProcessInvocationSpec], object]
ShellOpener = Callable[[str], None]


def normalize_user_path(path: Union[str, Path], kind: PlatformKind) -> str:
    """Expand ``~`` and environment variables in a user supplied path.

    explorer.exe only understands backslashes, so forward slashes are
    converted on Windows.
    """
    real_path = os.path.expanduser(os.path.expandvars(str(path)))
    if kind == PlatformKind.WINDOWS:
        real_path = real_path.replace("/", "\\")
    return real_path


class ExternalAppLauncher:
    """Opens URLs in the browser and paths in the file manager.

    Paths always reach the file manager as a single argument, never through
    a shell, so their content cannot inject commands.
    """

    def __init__(
        self,
        capabilities: PlatformCapabilities,
        starter: Starter = start_process,
        shell_opener: ShellOpener = open_with_shell,
    ) -> None:
        self._capabilities = capabilities
        self._starter = starter
        self._shell_opener = shell_opener

    @property
    def _kind(self) -> PlatformKind:
        return self._capabilities.kind

    def open_url(self, url: str) -> None:
        """Open a website in the default browser."""
        if self._capabilities.opens_urls_with_shell:
            self._shell_opener(url)
        elif self._capabilities.url_opener is not None:
            executable, *arguments = self._capabilities.url_opener
            self._start(executable, *arguments, url)
        else:
            LOGGER.error(f"{self._kind.value} can't open URLs!")

    def open_folder(self, path: Union[str, Path]) -> None:
        """Open ``path`` in the file manager, creating it if it doesn't exist."""
        real_path = normalize_user_path(path, self._kind)

        LOGGER.info(f"Creating {real_path} if it did not exist before")
        Path(real_path).mkdir(parents=True, exist_ok=True)

        if self._capabilities.file_manager is None:
            LOGGER.error(f"{self._kind.value} can't open folders!")
            return
        self._start(self._capabilities.file_manager, os.path.abspath(real_path))

    def open_folder_and_select_file(self, path: Union[str, Path]) -> None:
        """Open the folder containing ``path`` with the file selected.

        Only Windows and Mac select the file; Linux opens the containing
        folder. Does nothing if the file doesn't exist.
        """
        real_path = normalize_user_path(path, self._kind)
        if not os.path.isfile(real_path):
            LOGGER.error(
                f"{real_path} did not exist, operation to open its folder and select it was cancelled!"
            )
            return

        file_manager = self._capabilities.file_manager
        if file_manager is None:
            LOGGER.error(f"{self._kind.value} can't select files in a file manager!")
            return

        absolute = os.path.abspath(real_path)
        if self._capabilities.reveal_arguments is not None:
            self._start(file_manager, *self._capabilities.reveal_arguments, absolute)
        else:
            # Selecting a file on Linux needs D-Bus FileManager1; open the folder only.
            self._start(file_manager, os.path.dirname(absolute))

    def _start(self, executable: str, *arguments: str) -> None:
        self._starter(ProcessInvocationSpec(executable, tuple(arguments), hidden=False))
