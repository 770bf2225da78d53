import pytest

from gridbot.odometry import PI, Odometry, Pose


def _odom(gyro=None):
    return Odometry(3.2, 3.2, 9.6, 12, 12, 75, gyro)


def test_starts_at_origin():
    assert _odom().pose == Pose(0.0, 0.0, 0.0)


def test_one_revolution_straight():
    odom = _odom()
    pose = odom.update(12 * 75, 12 * 75)
    assert pose.x == pytest.approx(PI * 3.2)
    assert pose.y == pytest.approx(0.0)
    assert pose.theta == pytest.approx(0.0)


def test_no_change_in_counts_keeps_pose():
    odom = _odom()
    first = odom.update(500, 500)
    second = odom.update(500, 500)
    assert second == first


def test_spin_in_place():
    odom = _odom()
    pose = odom.update(-12 * 75, 12 * 75)
    assert pose.x == pytest.approx(0.0)
    assert pose.y == pytest.approx(0.0)
    assert pose.theta == pytest.approx(2 * PI * 3.2 / 9.6)


def test_left_turn_increases_theta_and_y():
    odom = _odom()
    odom.update(100, 200)
    pose = odom.update(300, 500)
    assert pose.theta > 0
    assert pose.y > 0


def test_updates_are_incremental():
    a = _odom()
    a.update(400, 400)
    split = a.update(900, 900)
    b = _odom()
    whole = b.update(900, 900)
    assert split.x == pytest.approx(whole.x)


def test_gyro_bias_removed():
    odom = _odom(gyro=lambda: 5)
    pose = odom.update(12 * 75, 12 * 75)
    assert pose.theta == 0
    assert pose.x == pytest.approx(PI * 3.2)


def test_gyro_heading_accumulates():
    readings = iter([3] * 100 + [7, 7])
    odom = _odom(gyro=lambda: next(readings))
    odom.update(0, 0)
    pose = odom.update(0, 0)
    assert pose.theta == 8
    assert pose.x == 0.0