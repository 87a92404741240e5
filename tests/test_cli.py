import logging
import subprocess
from dataclasses import replace

import pytest

from fconex.cli import main as cli
from fconex.cli.config import AppConfig
from fconex.config.settings import FconexConfig, OutputConfig, RenderConfig


@pytest.fixture()
def edge_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("A B\nB A\nA C\n", encoding="utf-8")
    return path


@pytest.fixture()
def config(tmp_path) -> FconexConfig:
    return FconexConfig(
        render=RenderConfig(open_images=False),
        output=OutputConfig(
            graph_image=str(tmp_path / "graph.png"),
            components_dir=str(tmp_path / "f_conex"),
        ),
    )


def _args(config, *argv):
    return cli.build_parser(config).parse_args(list(argv))


def test_default_config_uses_defaults():
    config = AppConfig().fconex

    assert config.output.output_file == "output.txt"
    assert config.output.component_image(3) == "graph-fconex-3.png"
    assert config.render.dot_program == "dot"


def test_parser_defaults(config):
    args = _args(config, "in.txt")

    assert args.output_file == "output.txt"
    assert args.no_graphviz is False


def test_run_without_graphviz_writes_dump(tmp_path, monkeypatch, edge_file, config):
    monkeypatch.setattr(cli, "has_program", lambda name: False)
    out = tmp_path / "out.txt"

    assert cli.run(_args(config, str(edge_file), str(out)), config) == 0
    assert out.read_text(encoding="utf-8") == "{\n\tA B\n\tB A\n}\n{\n}\n"
    assert not (tmp_path / "f_conex").exists()


def test_run_renders_graph_and_components(tmp_path, monkeypatch, edge_file, config):
    rendered = []
    monkeypatch.setattr(cli, "has_program", lambda name: True)
    monkeypatch.setattr(
        cli, "render_graph", lambda graph, path, render: rendered.append((len(graph), str(path))) or path
    )
    out = tmp_path / "out.txt"

    assert cli.run(_args(config, str(edge_file), str(out)), config) == 0
    assert rendered == [
        (3, str(tmp_path / "graph.png")),
        (2, str(tmp_path / "f_conex" / "graph-fconex-0.png")),
        (1, str(tmp_path / "f_conex" / "graph-fconex-1.png")),
    ]
    assert (tmp_path / "f_conex").is_dir()
    assert out.exists()


def test_no_graphviz_flag_skips_rendering(tmp_path, monkeypatch, edge_file, config):
    monkeypatch.setattr(cli, "has_program", lambda name: True)
    monkeypatch.setattr(cli, "render_graph", lambda *a: pytest.fail("should not render"))

    args = _args(config, "-n", str(edge_file), str(tmp_path / "out.txt"))
    assert cli.run(args, config) == 0


def test_disabled_render_config_skips_rendering(tmp_path, monkeypatch, edge_file, config):
    monkeypatch.setattr(cli, "has_program", lambda name: True)
    monkeypatch.setattr(cli, "render_graph", lambda *a: pytest.fail("should not render"))
    config = replace(config, render=replace(config.render, enabled=False))

    assert cli.run(_args(config, str(edge_file), str(tmp_path / "out.txt")), config) == 0


def test_render_failure_still_writes_dump(tmp_path, monkeypatch, edge_file, config):
    def failing(graph, path, render):
        raise subprocess.CalledProcessError(1, ["dot"])

    monkeypatch.setattr(cli, "has_program", lambda name: True)
    monkeypatch.setattr(cli, "render_graph", failing)

    out = tmp_path / "out.txt"

    assert cli.run(_args(config, str(edge_file), str(out)), config) == 1
    assert out.read_text(encoding="utf-8") == "{\n\tA B\n\tB A\n}\n{\n}\n"


def test_unwritable_output_returns_error(tmp_path, monkeypatch, edge_file, config):
    monkeypatch.setattr(cli, "has_program", lambda name: False)
    out = tmp_path / "missing-dir" / "out.txt"

    assert cli.run(_args(config, str(edge_file), str(out)), config) == 1
    assert not out.exists()


def test_log_level_is_case_insensitive():
    assert cli.log_level(FconexConfig(log_level="debug")) == logging.DEBUG
    assert cli.log_level(FconexConfig(log_level="Warning")) == logging.WARNING
    assert cli.log_level(FconexConfig(log_level="error"), verbose=True) == logging.DEBUG


def test_log_level_rejects_unknown_names():
    with pytest.raises(ValueError, match="unknown log level"):
        cli.log_level(FconexConfig(log_level="chatty"))


def test_missing_input_returns_error(tmp_path, config):
    args = _args(config, str(tmp_path / "nope.txt"), str(tmp_path / "out.txt"))

    assert cli.run(args, config) == 1
    assert not (tmp_path / "out.txt").exists()


def test_malformed_input_returns_error(tmp_path, config):
    path = tmp_path / "bad.txt"
    path.write_text("A B\nC\n", encoding="utf-8")

    assert cli.run(_args(config, str(path), str(tmp_path / "out.txt")), config) == 1


def test_main_end_to_end(tmp_path, monkeypatch, edge_file):
    monkeypatch.setattr(cli, "has_program", lambda name: False)
    out = tmp_path / "out.txt"

    assert cli.main([str(edge_file), str(out), "--no-graphviz"]) == 0
    assert out.read_text(encoding="utf-8").count("{") == 2
