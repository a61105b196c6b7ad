"""Tests for the routesim REPL dispatcher, commands and completer."""

from pathlib import Path

import pytest
from prompt_toolkit.document import Document

from routesim_lib.repl import MenuCompleter, ReplContext, build_menu_tree, get_prompt_text
from routesim_repl import handle_command, load_startup_config


@pytest.fixture
def ctx(reference_config) -> ReplContext:
    context = ReplContext()
    context.activate(reference_config)
    return context


@pytest.fixture
def menus() -> dict:
    return build_menu_tree()


# =============================================================================
# Navigation
# =============================================================================


class TestNavigation:
    def test_enter_and_leave_menu(self, ctx, menus) -> None:
        assert handle_command("topology", ctx, menus)
        assert ctx.path == ["topology"]
        assert get_prompt_text(ctx) == "routesim.topology> "
        handle_command("back", ctx, menus)
        assert ctx.path == []

    def test_home(self, ctx, menus) -> None:
        handle_command("config", ctx, menus)
        handle_command("home", ctx, menus)
        assert ctx.path == []

    def test_full_path_command_keeps_position(self, ctx, menus, capsys) -> None:
        handle_command("topology routers", ctx, menus)
        assert ctx.path == []
        assert "10.0.4.1" in capsys.readouterr().out

    def test_unknown_command(self, ctx, menus, capsys) -> None:
        assert handle_command("frobnicate", ctx, menus)
        assert "Unknown command" in capsys.readouterr().out

    def test_exit(self, ctx, menus) -> None:
        assert handle_command("exit", ctx, menus) is False

    def test_dirty_prompt_marker(self, ctx) -> None:
        ctx.dirty = True
        assert get_prompt_text(ctx) == "routesim*> "


# =============================================================================
# Route command (inline, no prompting)
# =============================================================================


class TestRouteCommand:
    def test_direct(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.4.1 direct", ctx, menus)
        out = capsys.readouterr().out
        assert "NEW ROUTE LOGGED" in out
        assert ctx.routes_logged == 1

    def test_history_hit(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.4.1 direct", ctx, menus)
        handle_command("route 10.0.1.1 10.0.4.1 via 2 3", ctx, menus)
        out = capsys.readouterr().out
        assert "HISTORY FOUND" in out
        assert ctx.routes_logged == 1

    def test_via(self, ctx, menus) -> None:
        handle_command("route 10.0.1.1 10.0.3.1 via 2", ctx, menus)
        entry = ctx.controller.history()[0]
        assert entry.path.routers == (1, 2, 3)

    def test_via_with_rejections(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.3.1 via 3 2", ctx, menus)
        out = capsys.readouterr().out
        assert "intermediate router first" in out
        assert ctx.controller.history()[0].path.routers == (1, 2, 3)

    def test_incomplete_route(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.3.1 direct", ctx, menus)
        assert "Route incomplete" in capsys.readouterr().out
        assert ctx.routes_logged == 0

    def test_unknown_ip(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.7.7.7 direct", ctx, menus)
        assert "not found in any router's network list" in capsys.readouterr().out

    def test_invalid_ip(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1 10.0.4.1 direct", ctx, menus)
        assert "Invalid source IP format" in capsys.readouterr().out

    def test_bad_mode(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.4.1 sideways", ctx, menus)
        assert "Unknown route mode" in capsys.readouterr().out

    def test_history_listing(self, ctx, menus, capsys) -> None:
        handle_command("history", ctx, menus)
        assert "No routes logged yet" in capsys.readouterr().out
        handle_command("route 10.0.1.1 10.0.3.1 via 2", ctx, menus)
        handle_command("history", ctx, menus)
        assert "Route history (1/20)" in capsys.readouterr().out


# =============================================================================
# Config commands
# =============================================================================


class TestConfigCommands:
    def test_save(self, ctx, menus, tmp_path: Path) -> None:
        ctx.config_file = tmp_path / "topology.yaml"
        ctx.dirty = True
        handle_command("config save", ctx, menus)
        assert ctx.config_file.exists()
        assert not ctx.dirty

    def test_networks_locked_after_routes(self, ctx, menus, capsys) -> None:
        handle_command("route 10.0.1.1 10.0.4.1 direct", ctx, menus)
        handle_command("config networks", ctx, menus)
        assert "cannot change" in capsys.readouterr().out

    def test_show(self, ctx, menus, capsys) -> None:
        handle_command("config show", ctx, menus)
        assert "Cache capacity:  20 routes" in capsys.readouterr().out


# =============================================================================
# Startup
# =============================================================================


class TestStartup:
    def test_missing_file_uses_reference_topology(self, tmp_path: Path) -> None:
        ctx = ReplContext(config_file=tmp_path / "missing.yaml")
        assert load_startup_config(ctx)
        assert ctx.topology.adjacent(1, 4)
        assert ctx.config.total_networks == 0

    def test_invalid_file_refuses_to_start(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "topology.yaml"
        path.write_text("routers:\n  1: [10.0.0.1]\n  2: [10.0.0.1]\n")
        ctx = ReplContext(config_file=path)
        assert not load_startup_config(ctx)
        assert ctx.controller is None
        assert "already registered to router 1" in capsys.readouterr().out


# =============================================================================
# Completion
# =============================================================================


class TestCompleter:
    def completions(self, ctx, menus, text: str) -> list[str]:
        completer = MenuCompleter(ctx, menus)
        return [c.text for c in completer.get_completions(Document(text), None)]

    def test_root(self, ctx, menus) -> None:
        items = self.completions(ctx, menus, "")
        assert {"route", "history", "topology", "config", "help", "exit"} <= set(items)
        assert "back" not in items

    def test_prefix(self, ctx, menus) -> None:
        assert self.completions(ctx, menus, "to") == ["topology"]

    def test_submenu(self, ctx, menus) -> None:
        assert set(self.completions(ctx, menus, "config ")) == {"show", "networks", "save"}

    def test_route_ips(self, ctx, menus) -> None:
        items = self.completions(ctx, menus, "route 10.0.4")
        assert set(items) == {"10.0.4.1"}

    def test_route_mode(self, ctx, menus) -> None:
        assert self.completions(ctx, menus, "route 10.0.1.1 10.0.4.1 ") == ["direct", "via"]
