import json

from stellar_pcg.cli import main
from stellar_pcg.core.config_loader import GenerationConfig, save_generation_config
from stellar_pcg.encounters.patrol_data import PatrolConfig
from stellar_pcg.level.layout_data import LayoutConfig


def test_cli_writes_mission_json(tmp_path):
    config_path = str(tmp_path / "cfg.json")
    save_generation_config(GenerationConfig(LayoutConfig(obstacle_chance=0.0), PatrolConfig()), config_path)
    output = tmp_path / "out" / "mission.json"

    code = main(["--seed", "5", "--config", config_path, "--output", str(output), "--validate"])

    assert code == 0
    data = json.loads(output.read_text())
    assert data["seed"] == 5
    assert data["layout"]["obstacle"] == []
    assert len(data["encounters"]["guards"]) <= 8


def test_cli_rejects_unviable_layout(tmp_path):
    config_path = str(tmp_path / "cfg.json")
    # Rooms can never fit, so the layout has no rooms
    tiny = LayoutConfig(level_width=8, level_height=8)
    save_generation_config(GenerationConfig(tiny, PatrolConfig()), config_path)

    assert main(["--seed", "1", "--config", config_path, "--validate"]) == 1
