import json
import math
import random

import pytest

from proximity_graph import (
    Point,
    ProximityScene,
    SceneConfig,
    euclidean_distance,
    inside_canvas,
    within_distance,
)


def test_within_distance_is_strict() -> None:
    connected = within_distance(200.0)
    origin = Point(x=0.0, y=0.0)
    assert connected(origin, Point(x=199.9, y=0.0))
    assert not connected(origin, Point(x=200.0, y=0.0))
    assert euclidean_distance(origin, Point(x=3.0, y=4.0)) == 5.0


@pytest.mark.parametrize("threshold", [-1.0, math.inf, math.nan])
def test_within_distance_rejects_bad_threshold(threshold: float) -> None:
    with pytest.raises(ValueError):
        within_distance(threshold)


def test_inside_canvas_excludes_edges() -> None:
    visible = inside_canvas(100, 50)
    assert visible(Point(x=50.0, y=25.0))
    assert not visible(Point(x=0.0, y=25.0))
    assert not visible(Point(x=100.0, y=25.0))
    assert not visible(Point(x=50.0, y=50.0))
    assert not visible(Point(x=50.0, y=-3.0))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"canvas_size": (0, 100)},
        {"canvas_size": (100, -1)},
        {"point_size": 0},
        {"max_velocity": -0.5},
    ],
)
def test_scene_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        SceneConfig(**kwargs)


def test_spawn_uses_random_heading_and_speed() -> None:
    scene = ProximityScene(SceneConfig(max_velocity=1.0), rng=random.Random(7))
    point = scene.spawn_at(120, 80)
    assert point.position == (120.0, 80.0)
    assert 0.0 <= point.angle < 2 * math.pi
    assert 0.0 <= point.velocity < 1.0
    assert scene.graph.get_points() == (point,)


def test_spawned_points_connect_by_distance() -> None:
    scene = ProximityScene(SceneConfig(canvas_size=(800, 600), connection_distance=200.0), rng=random.Random(1))
    scene.spawn_many([(100.0, 100.0), (150.0, 100.0), (700.0, 500.0)])
    assert scene.graph.edges() == [(1, 0)]


def test_tick_culls_points_leaving_canvas() -> None:
    scene = ProximityScene(SceneConfig(canvas_size=(100, 100)))
    leaving = Point(x=99.5, y=50.0, angle=0.0)
    staying = Point(x=50.0, y=50.0, angle=0.0)
    scene.graph.add_point(leaving)
    scene.graph.add_point(staying)

    assert scene.tick() == 1
    assert scene.graph.get_points() == (staying,)
    assert staying.position == (51.0, 50.0)
    assert scene.tick_count == 1


def test_points_eventually_leave_canvas() -> None:
    scene = ProximityScene(SceneConfig(canvas_size=(60, 40), seed=3))
    scene.spawn_many([(30.0, 20.0), (10.0, 10.0), (50.0, 30.0)])
    for _ in range(200):
        scene.tick()
    assert len(scene.graph) == 0
    assert scene.graph.get_connections().shape == (0, 0)


def test_step_renders_before_moving() -> None:
    scene = ProximityScene(SceneConfig(canvas_size=(40, 40), point_size=2))
    scene.graph.add_point(Point(x=10.0, y=10.0, angle=0.0))
    frame = scene.step()
    assert frame.getpixel((10, 10)) == (255, 0, 0)
    assert scene.graph.positions() == [(11.0, 10.0)]


def test_clear_keeps_connection_rule() -> None:
    scene = ProximityScene(SceneConfig(connection_distance=10.0))
    scene.spawn_many([(100.0, 100.0), (105.0, 100.0)])
    scene.clear()
    assert len(scene.graph) == 0
    scene.spawn_many([(100.0, 100.0), (150.0, 100.0)])
    assert scene.graph.edges() == []


def test_snapshot_is_json_serializable() -> None:
    scene = ProximityScene(SceneConfig(canvas_size=(300, 200)))
    scene.graph.add_point(Point(x=10.0, y=20.0))
    scene.graph.add_point(Point(x=30.0, y=20.0))
    frames = [scene.snapshot(0)]
    scene.tick()
    frames.append(scene.snapshot())

    payload = json.loads(json.dumps(scene.timeline_payload(frames)))
    assert payload["canvas"] == {"width": 300, "height": 200}
    assert payload["connection_distance"] == 200.0
    assert payload["timeline"][0] == {"step": 0, "positions": [[10.0, 20.0], [30.0, 20.0]], "edges": [[1, 0]]}
    assert payload["timeline"][1]["step"] == 1
