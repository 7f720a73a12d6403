# notifications.py
from __future__ import annotations
import shutil
import subprocess
from collections import namedtuple
from typing import Callable, Sequence

from loguru import logger

from ext_organizer.console import Console
from ext_organizer.mover import MoveReport

try:
    from win11toast import toast as _toast
except Exception:
    _toast = None

try:
    from desktop_notifier import DesktopNotifierSync as _DesktopNotifierSync
except Exception:
    _DesktopNotifierSync = None

Notification = namedtuple("Notification", ["title", "body", "icon"])

APP_TITLE = "File Organizer"
EXPIRE_MS = 5000
COMMAND_TIMEOUT = 10
# zenity exits 5 when --timeout runs out before the dialog is closed
ZENITY_OK_CODES = frozenset({0, 5})


def summarize(report: MoveReport) -> Notification:
    moved, failed = len(report.moved), len(report.failed)
    if not moved:
        return Notification(APP_TITLE, "No files were moved.", "info")
    body = f"Moved {moved} file(s) to '{report.destination.name}'."
    if failed:
        body += f" {failed} failed."
    return Notification(APP_TITLE, body, "folder-download")


# -------------------- strategies --------------------
class Notifier:
    name = "notifier"

    def notify(self, notification: Notification) -> bool:
        raise NotImplementedError


class ToastNotifier(Notifier):
    """Native in-process toast."""
    name = "toast"

    def __init__(self, toast: Callable | None = None):
        self._toast = toast if toast is not None else _toast

    def notify(self, notification: Notification) -> bool:
        if self._toast is None:
            return False
        self._toast(notification.title, notification.body, duration="short")
        return True


def _desktop_send(title: str, body: str) -> None:
    _DesktopNotifierSync(app_name=APP_TITLE).send(title=title, message=body)


class DesktopNotifier(Notifier):
    """Native in-process notification over D-Bus (Linux) or Notification Center (macOS)."""
    name = "desktop"

    def __init__(self, send: Callable | None = None):
        if send is None and _DesktopNotifierSync is not None:
            send = _desktop_send
        self._send = send

    def notify(self, notification: Notification) -> bool:
        if self._send is None:
            return False
        self._send(notification.title, notification.body)
        return True


class CommandNotifier(Notifier):
    """Runs an external notifier binary if it is on PATH."""

    def __init__(
        self,
        program: str,
        build_args: Callable[[Notification], list[str]],
        timeout: float = COMMAND_TIMEOUT,
        ok_codes: frozenset[int] = frozenset({0}),
    ):
        self.name = program
        self.program = program
        self.build_args = build_args
        self.timeout = timeout
        self.ok_codes = ok_codes

    def notify(self, notification: Notification) -> bool:
        exe = shutil.which(self.program)
        if exe is None:
            logger.debug(f"{self.program} not found on PATH")
            return False
        try:
            out = subprocess.run(
                [exe, *self.build_args(notification)],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"{self.program} timed out after {self.timeout}s")
            return False
        except OSError as e:
            logger.debug(f"{self.program} could not run: {e}")
            return False
        if out.returncode not in self.ok_codes:
            logger.debug(f"{self.program} exited {out.returncode}: {out.stderr.strip()}")
            return False
        return True


class ConsoleNotifier(Notifier):
    name = "console"

    def __init__(self, console: Console):
        self.console = console

    def notify(self, notification: Notification) -> bool:
        self.console.notification(notification.title, notification.body)
        return True


def _notify_send_args(n: Notification) -> list[str]:
    return [n.title, n.body, "--icon", n.icon, "--expire-time", str(EXPIRE_MS)]


def _kdialog_args(n: Notification) -> list[str]:
    return ["--title", n.title, "--passivepopup", n.body, str(EXPIRE_MS // 1000)]


def _zenity_args(n: Notification) -> list[str]:
    return ["--info", "--title", n.title, "--text", n.body, "--timeout", str(EXPIRE_MS // 1000)]


def default_notifiers(console: Console) -> list[Notifier]:
    return [
        ToastNotifier(),       # Windows
        DesktopNotifier(),     # D-Bus, macOS
        CommandNotifier("notify-send", _notify_send_args),
        CommandNotifier("kdialog", _kdialog_args),
        CommandNotifier("zenity", _zenity_args, ok_codes=ZENITY_OK_CODES),
        ConsoleNotifier(console),
    ]


# -------------------- public API --------------------
def send_notification(notification: Notification, notifiers: Sequence[Notifier]) -> str | None:
    """
    Try each notifier in order and stop at the first that succeeds.
    Never raises; returns the name of the notifier used, or None.
    """
    for n in notifiers:
        try:
            if n.notify(notification):
                logger.debug(f"notification sent via {n.name}")
                return n.name
        except Exception as e:
            logger.warning(f"notifier {n.name} failed: {e!r}")
            continue
        logger.debug(f"notifier {n.name} unavailable, trying next")
    logger.warning("no notifier succeeded")
    return None
