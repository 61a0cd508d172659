import pytest

from fractalgarden import config
from fractalgarden.config import FrameConfig, GardenConfig, load_config, parse_motifs
from fractalgarden.errors import ConfigurationError
from fractalgarden.main import resolve_config
from fractalgarden.patterns.palette import PALETTE


def test_parse_motifs_splits_and_trims():
    assert parse_motifs("🌳,🌸,🍄") == ("🌳", "🌸", "🍄")
    assert parse_motifs(" a , b,,c ") == ("a", "b", "", "c")


def test_blank_motif_keeps_its_slot():
    frame = GardenConfig(motif_text="A,,B").snapshot()
    assert frame.active_length == 3
    assert [frame.content_for(i) for i in range(4)] == ["A", "", "B", "A"]


@pytest.mark.parametrize("text", ["", "   ", ",,", " , ", None])
def test_empty_motif_list_falls_back_to_placeholder(text, caplog):
    with caplog.at_level("WARNING", logger="fractalgarden"):
        assert parse_motifs(text) == (config.PLACEHOLDER_MOTIF,)
    assert "Empty motif list" in caplog.text


def test_empty_motifs_still_render_something():
    frame = GardenConfig(motif_text="").snapshot()
    assert frame.active_length == 1
    assert frame.content_for(17) == config.PLACEHOLDER_MOTIF


def test_snapshot_freezes_values():
    cfg = GardenConfig(motif_text="x,y", depth=4, step_delay_ms=25, debug=True)
    frame = cfg.snapshot()
    cfg.depth = 9
    cfg.motif_text = "z"

    assert frame.depth == 4
    assert frame.motifs == ("x", "y")
    assert frame.motif_text == "x,y"
    assert frame.step_delay == pytest.approx(0.025)
    assert frame.debug is True
    with pytest.raises(AttributeError):
        frame.depth = 2


def test_active_length_follows_mode():
    assert FrameConfig(motifs=("a", "b", "c")).active_length == 3
    shapes = FrameConfig(motifs=("a", "b", "c"), use_motifs=False)
    assert shapes.active_length == len(PALETTE)
    assert shapes.content_for(6) == 1


def test_depth_adjustment_is_clamped():
    cfg = GardenConfig(depth=11)
    assert cfg.adjust_depth(5) == config.MAX_DEPTH
    cfg.depth = 2
    assert cfg.adjust_depth(-5) == config.MIN_DEPTH


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "garden.yaml"
    path.write_text(
        "motif_text: '*,+'\n"
        "depth: 5\n"
        "animate: true\n"
        "background: [10, 20, 30]\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.motif_text == "*,+"
    assert cfg.depth == 5
    assert cfg.animate is True
    assert cfg.background == (10, 20, 30)
    assert cfg.fractal_count == GardenConfig().fractal_count


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == GardenConfig()


@pytest.mark.parametrize(
    "body",
    [
        "colour: red\n",
        "depth: 13\n",
        "depth: 0\n",
        "animate: sometimes\n",
        "fractal_count: many\n",
        "background: 3\n",
        "background: [300, 0, 0]\n",
        "background: [-1, 0, 0]\n",
        "background: [1.5, 0, 0]\n",
        "background: [0, 0]\n",
        "background: [true, 0, 0]\n",
        "seed: abc\n",
        "seed: true\n",
        "seed: 1.5\n",
        "log_file: 5\n",
        "- just\n- a list\n",
        "depth: [1\n",
        "depth:\n",
    ],
)
def test_bad_settings_are_rejected(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_optional_settings_accept_values_or_empty(tmp_path):
    path = tmp_path / "garden.yaml"
    path.write_text("seed: 3\nlog_file: garden.log\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.seed == 3
    assert cfg.log_file == "garden.log"

    path.write_text("seed:\nlog_file:\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.seed is None
    assert cfg.log_file is None


def test_missing_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "nope.yaml")


def test_command_line_overrides_file(tmp_path):
    path = tmp_path / "garden.yaml"
    path.write_text("depth: 5\nfractal_count: 2\n", encoding="utf-8")
    cfg = resolve_config(["--config", str(path), "--depth", "7", "--shapes", "--debug"])
    assert cfg.depth == 7
    assert cfg.fractal_count == 2
    assert cfg.use_motifs is False
    assert cfg.debug is True
    assert cfg.animate is False
