import pytest

from swerve_input.controllers.mapping import DeviceMap, device_map, load_device_maps


def test_load_device_maps(tmp_path):
    path = tmp_path / "devices.yaml"
    path.write_text(
        "joystick:\n"
        "  axes: {X: 0, y: 1, twist: 3}\n"
        "  buttons:\n"
        "    2: 4\n"
        "gamepad:\n"
        "  axes: {right_x: 2, right_y: 3}\n"
        "  buttons: {rb: 7}\n",
        encoding="utf-8",
    )
    maps = load_device_maps(path)

    assert maps["joystick"].axes == {"x": 0, "y": 1, "twist": 3}
    assert maps["joystick"].buttons == {"2": 4}
    assert maps["gamepad"] == DeviceMap(axes={"right_x": 2, "right_y": 3}, buttons={"rb": 7})


def test_empty_file_gives_default_maps(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    maps = load_device_maps(path)
    assert maps["joystick"] == DeviceMap()
    assert maps["gamepad"] == DeviceMap()


@pytest.mark.parametrize(
    "text",
    [
        "gamepad:\n  axes: {right_x: two}\n",
        "gamepad:\n  axes: [1, 2]\n",
        "gamepad:\n  buttons: {rb: true}\n",
        "joystick: 3\n",
        "- just\n- a list\n",
    ],
)
def test_malformed_maps_raise(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_device_maps(path)


def test_device_map_lookup():
    assert device_map(None, "gamepad") == DeviceMap()
    maps = {"gamepad": DeviceMap(axes={"right_x": 2})}
    assert device_map(maps, "gamepad").axes == {"right_x": 2}
    assert device_map(maps, "joystick") == DeviceMap()
