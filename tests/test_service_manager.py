"""ServiceManager and ServiceHandle tests against a fake systemctl."""

import subprocess
import unittest

from unitctl.core.errors import (CommandExecutionError, FilesystemError, UnexpectedOutputError,
                                 UnitNotFoundError)
from unitctl.core.service_manager import ServiceManager
from unitctl.models.service import ActiveState, EnabledState, ServiceHandle, ServiceInfo

from .fakes import FakeRunner, UnitTree


class ManagerTestCase(unittest.TestCase):

    def setUp(self):
        self.tree = UnitTree(count=3)
        self.tree.add(1, "demo.service")
        self.runner = FakeRunner()
        self.manager = ServiceManager(self.tree.locator(), self.runner)

    def tearDown(self):
        self.tree.cleanup()

    def reply(self, subcommand, returncode, output, name="demo.service"):
        self.runner.replies[(subcommand, name)] = (returncode, output)


class TestResolve(ManagerTestCase):

    def test_resolve_existing(self):
        handle = self.manager.resolve("demo.service")
        self.assertIsInstance(handle, ServiceHandle)
        self.assertEqual(handle.name, "demo.service")
        self.assertIs(handle.manager, self.manager)
        self.assertEqual(self.runner.calls, [])

    def test_resolve_missing(self):
        with self.assertRaises(UnitNotFoundError) as ctx:
            self.manager.resolve("ghost.service")
        self.assertEqual(ctx.exception.name, "ghost.service")
        self.assertEqual(str(ctx.exception), "unit not exist: ghost.service")

    def test_resolve_propagates_filesystem_error(self):
        error = FilesystemError("/etc/systemd/system/", PermissionError("denied"))

        class BrokenLocator:
            def exists(self, name):
                raise error

        manager = ServiceManager(BrokenLocator(), self.runner)
        with self.assertRaises(FilesystemError) as ctx:
            manager.resolve("demo.service")
        self.assertIs(ctx.exception, error)

    def test_handles_compare_by_name(self):
        other = ServiceManager(self.tree.locator(), FakeRunner())
        self.assertEqual(self.manager.resolve("demo.service"), other.resolve("demo.service"))

    def test_unit_exists(self):
        self.assertTrue(self.manager.unit_exists("demo.service"))
        self.assertFalse(self.manager.unit_exists("ghost.service"))


class TestQueries(ManagerTestCase):

    def test_active(self):
        self.reply("is-active", 0, "active\n")
        self.assertTrue(self.manager.is_active("demo.service"))
        self.assertEqual(self.runner.calls, [("is-active", "demo.service")])

    def test_inactive(self):
        self.reply("is-active", 0, "inactive\n")
        self.assertFalse(self.manager.is_active("demo.service"))

    def test_active_unexpected_output(self):
        for output in ("activating\n", "failed\n", "", "active", "active\n\n", " active\n", "ACTIVE\n"):
            self.reply("is-active", 0, output)
            with self.assertRaises(UnexpectedOutputError) as ctx:
                self.manager.is_active("demo.service")
            self.assertEqual(ctx.exception.output, output)

    def test_active_nonzero_exit(self):
        self.reply("is-active", 3, "inactive\n")
        with self.assertRaises(CommandExecutionError) as ctx:
            self.manager.is_active("demo.service")
        self.assertEqual(ctx.exception.output, "inactive\n")
        self.assertIsInstance(ctx.exception.error, subprocess.CalledProcessError)
        self.assertEqual(ctx.exception.error.returncode, 3)
        self.assertIn("inactive", str(ctx.exception))

    def test_active_invocation_failure(self):
        error = FileNotFoundError(2, "No such file or directory", "/usr/bin/systemctl")
        self.runner.replies[("is-active", "demo.service")] = error
        with self.assertRaises(CommandExecutionError) as ctx:
            self.manager.is_active("demo.service")
        self.assertIs(ctx.exception.error, error)
        self.assertIs(ctx.exception.__cause__, error)
        self.assertEqual(ctx.exception.output, "")

    def test_command_line_matches_on_failure(self):
        self.reply("is-active", 3, "inactive\n")
        with self.assertRaises(CommandExecutionError) as exited:
            self.manager.is_active("demo.service")
        self.runner.replies[("is-active", "demo.service")] = OSError("exec format error")
        with self.assertRaises(CommandExecutionError) as not_run:
            self.manager.is_active("demo.service")
        expected = ["/usr/bin/systemctl", "is-active", "demo.service"]
        self.assertEqual(exited.exception.command, expected)
        self.assertEqual(not_run.exception.command, expected)

    def test_active_timeout(self):
        error = subprocess.TimeoutExpired(["systemctl"], 5, output=b"partial")
        self.runner.replies[("is-active", "demo.service")] = error
        with self.assertRaises(CommandExecutionError) as ctx:
            self.manager.is_active("demo.service")
        self.assertEqual(ctx.exception.output, "partial")

    def test_query_skips_existence_check(self):
        self.reply("is-active", 0, "inactive\n", name="ghost.service")
        self.assertFalse(self.manager.is_active("ghost.service"))

    def test_enabled(self):
        self.reply("is-enabled", 0, "enabled\n")
        self.assertTrue(self.manager.is_enabled("demo.service"))

    def test_disabled(self):
        self.reply("is-enabled", 0, "disabled\n")
        self.assertFalse(self.manager.is_enabled("demo.service"))

    def test_enabled_unexpected_output(self):
        for output in ("static\n", "masked\n", "linked\n", "enabled"):
            self.reply("is-enabled", 0, output)
            with self.assertRaises(UnexpectedOutputError):
                self.manager.is_enabled("demo.service")

    def test_enabled_nonzero_exit(self):
        self.reply("is-enabled", 1, "Failed to get unit file state\n")
        with self.assertRaises(CommandExecutionError):
            self.manager.is_enabled("demo.service")

    def test_normalized_output(self):
        manager = ServiceManager(self.tree.locator(), self.runner, normalize_output=True)
        self.reply("is-active", 0, "active")
        self.assertTrue(manager.is_active("demo.service"))
        self.reply("is-enabled", 0, "disabled\r\n")
        self.assertFalse(manager.is_enabled("demo.service"))
        self.reply("is-active", 0, "activating\n")
        with self.assertRaises(UnexpectedOutputError):
            manager.is_active("demo.service")

    def test_active_state(self):
        self.reply("is-active", 3, "activating\n")
        self.assertEqual(self.manager.active_state("demo.service"), ActiveState.ACTIVATING)
        self.reply("is-active", 0, "active\n")
        self.assertEqual(self.manager.active_state("demo.service"), ActiveState.ACTIVE)
        self.reply("is-active", 3, "something-new\n")
        self.assertEqual(self.manager.active_state("demo.service"), ActiveState.UNKNOWN)

    def test_enabled_state(self):
        self.reply("is-enabled", 0, "static\n")
        self.assertEqual(self.manager.enabled_state("demo.service"), EnabledState.STATIC)
        self.reply("is-enabled", 1, "masked-runtime\n")
        self.assertEqual(self.manager.enabled_state("demo.service"), EnabledState.MASKED_RUNTIME)

    def test_rich_state_invocation_failure(self):
        self.runner.replies[("is-active", "demo.service")] = PermissionError("denied")
        with self.assertRaises(CommandExecutionError):
            self.manager.active_state("demo.service")


class TestMutations(ManagerTestCase):

    ACTIONS = ("enable", "disable", "start", "stop", "restart", "reload")

    def test_handle_methods(self):
        handle = self.manager.resolve("demo.service")
        for action in self.ACTIONS:
            self.assertIsNone(getattr(handle, action)())
        self.assertEqual(self.runner.calls, [(action, "demo.service") for action in self.ACTIONS])

    def test_handle_failure(self):
        handle = self.manager.resolve("demo.service")
        for action in self.ACTIONS:
            self.reply(action, 1, "Access denied\n")
            with self.assertRaises(CommandExecutionError) as ctx:
                getattr(handle, action)()
            self.assertEqual(ctx.exception.output, "Access denied\n")
            self.assertIn("Access denied", str(ctx.exception))

    def test_output_ignored_on_success(self):
        self.reply("start", 0, "Warning: unit file changed on disk\n")
        self.manager.resolve("demo.service").start()

    def test_invocation_failure(self):
        self.runner.replies[("stop", "demo.service")] = OSError("exec format error")
        with self.assertRaises(CommandExecutionError):
            self.manager.resolve("demo.service").stop()

    def test_named_methods(self):
        for action in self.ACTIONS:
            getattr(self.manager, "{}_service".format(action))("demo.service")
        self.assertEqual(self.runner.calls, [(action, "demo.service") for action in self.ACTIONS])

    def test_named_methods_missing_unit(self):
        for action in self.ACTIONS:
            with self.assertRaises(UnitNotFoundError):
                getattr(self.manager, "{}_service".format(action))("ghost.service")
        self.assertEqual(self.runner.calls, [])

    def test_execute_without_check(self):
        self.manager.execute_action("start", "ghost.service")
        self.assertEqual(self.runner.calls, [("start", "ghost.service")])

    def test_execute_invalid_action(self):
        with self.assertRaises(ValueError):
            self.manager.execute_action("mask", "demo.service")
        self.assertEqual(self.runner.calls, [])

    def test_no_verification_after_start(self):
        self.manager.start_service("demo.service")
        self.assertEqual(self.runner.calls, [("start", "demo.service")])


class TestHandle(ManagerTestCase):

    def test_demo_scenario(self):
        self.reply("is-active", 0, "active\n")
        self.reply("start", 0, "")
        handle = self.manager.resolve("demo.service")
        self.assertTrue(handle.is_active())
        self.assertIsNone(handle.start())

    def test_live_state(self):
        handle = self.manager.resolve("demo.service")
        self.reply("is-active", 0, "inactive\n")
        self.assertFalse(handle.is_active())
        self.reply("is-active", 0, "active\n")
        self.assertTrue(handle.is_active())

    def test_snapshot(self):
        self.reply("is-active", 0, "active\n")
        self.reply("is-enabled", 0, "disabled\n")
        info = self.manager.resolve("demo.service").snapshot()
        self.assertEqual(info, ServiceInfo(name="demo.service", active=True, enabled=False))

    def test_rich_states(self):
        self.reply("is-active", 3, "failed\n")
        self.reply("is-enabled", 0, "enabled\n")
        handle = self.manager.resolve("demo.service")
        self.assertEqual(handle.active_state(), ActiveState.FAILED)
        self.assertEqual(handle.enabled_state(), EnabledState.ENABLED)

    def test_immutable(self):
        handle = self.manager.resolve("demo.service")
        with self.assertRaises(AttributeError):
            handle.name = "other.service"

    def test_repr_hides_manager(self):
        self.assertEqual(repr(self.manager.resolve("demo.service")),
                         "ServiceHandle(name='demo.service')")


if __name__ == "__main__":
    unittest.main()
