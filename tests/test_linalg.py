import copy

import pytest

from uinta.linalg import Mat4, RunningAverage, SmoothFloat, Vec2, Vec3, Vec4


def test_vec2_construction():
    assert Vec2() == Vec2(0.0, 0.0)
    assert Vec2(3.0) == Vec2(3.0, 3.0)
    vec = Vec2(1.0, 2.0)
    assert copy.copy(vec) == Vec2(1.0, 2.0)
    vec.x = 3.0
    vec.y = 5.0
    assert vec == Vec2(3.0, 5.0)


def test_vec2_arithmetic():
    assigned = Vec2(7.0, 11.0)
    assert assigned + Vec2(1.0, 2.0) == Vec2(assigned.x + 1.0, assigned.y + 2.0)
    assert assigned - Vec2(1.0, 2.0) == Vec2(assigned.x - 1.0, assigned.y - 2.0)
    assert Vec2(2.0, 3.0) * Vec2(4.0, 5.0) == Vec2(8.0, 15.0)
    assert Vec2(2.0, 3.0) * 2.0 == Vec2(4.0, 6.0)
    assert 2.0 * Vec2(2.0, 3.0) == Vec2(4.0, 6.0)
    assert Vec2(8.0, 9.0) / Vec2(2.0, 3.0) == Vec2(4.0, 3.0)


def test_vec2_mixed_types_rejected():
    with pytest.raises(TypeError):
        Vec2(1.0) + Vec3(1.0)


def test_partial_components_rejected():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0)
    with pytest.raises(TypeError):
        Vec4(1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 1), (1, 1), True),
        ((1, 1), (1, 0), False),
        ((1, 1), (0, 1), False),
        ((1, 1), (0, 0), False),
    ],
)
def test_vec2_eq(a, b, expected):
    assert (Vec2(*a) == Vec2(*b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [((1, 1), (0, 0), True), ((1, 0), (0, 0), False), ((0, 1), (0, 0), False)],
)
def test_vec2_gt(a, b, expected):
    assert (Vec2(*a) > Vec2(*b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 1), (0, 0), True),
        ((1, 0), (0, 0), True),
        ((0, 1), (0, 0), True),
        ((1, 1), (2, 0), False),
        ((1, 0), (2, 0), False),
        ((0, 1), (2, 0), False),
        ((1, 1), (0, 2), False),
        ((1, 0), (0, 2), False),
        ((0, 1), (0, 2), False),
        ((1, 1), (2, 2), False),
        ((1, 0), (2, 2), False),
        ((0, 1), (2, 2), False),
    ],
)
def test_vec2_ge(a, b, expected):
    assert (Vec2(*a) >= Vec2(*b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [((0, 0), (1, 1), True), ((0, 0), (1, 0), False), ((0, 0), (0, 1), False)],
)
def test_vec2_lt(a, b, expected):
    assert (Vec2(*a) < Vec2(*b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (1, 1), True),
        ((0, 0), (1, 0), True),
        ((0, 0), (0, 1), True),
        ((2, 0), (1, 1), False),
        ((2, 0), (1, 0), False),
        ((2, 0), (0, 1), False),
        ((0, 2), (1, 1), False),
        ((0, 2), (1, 0), False),
        ((0, 2), (0, 1), False),
        ((2, 2), (1, 1), False),
        ((2, 2), (1, 0), False),
        ((2, 2), (0, 1), False),
    ],
)
def test_vec2_le(a, b, expected):
    assert (Vec2(*a) <= Vec2(*b)) is expected


def test_vec3_construction():
    assert Vec3() == Vec3(0.0, 0.0, 0.0)
    assert Vec3(3.0) == Vec3(3.0, 3.0, 3.0)
    copied = copy.copy(Vec3(1.0, 2.0, 3.0))
    assert copied == Vec3(1.0, 2.0, 3.0)
    copied.x, copied.y, copied.z = 5.0, 7.0, 11.0
    assert copied == Vec3(5.0, 7.0, 11.0)
    assert Vec3(13.0, 17.0, 23.0) == Vec3(13.0, 17.0, 23.0)
    assert Vec3.from_vec2(Vec2(1.0, 2.0), 3.0) == Vec3(1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 1, 1), (1, 1, 1), True),
        ((1, 1, 1), (1, 0, 0), False),
        ((1, 1, 1), (0, 1, 0), False),
        ((1, 1, 1), (0, 0, 1), False),
        ((1, 1, 1), (0, 0, 0), False),
    ],
)
def test_vec3_eq(a, b, expected):
    assert (Vec3(*a) == Vec3(*b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 1, 1), (0, 0, 0), True),
        ((1, 0, 0), (0, 0, 0), False),
        ((0, 1, 0), (0, 0, 0), False),
        ((0, 0, 1), (0, 0, 0), False),
    ],
)
def test_vec3_gt(a, b, expected):
    assert (Vec3(*a) > Vec3(*b)) is expected


_VEC3_SMALL = [(1, 1, 1), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
_VEC3_BIG = [(2, 0, 0), (0, 2, 0), (0, 0, 2), (2, 2, 2)]


@pytest.mark.parametrize("a", _VEC3_SMALL)
def test_vec3_ge_true(a):
    assert Vec3(*a) >= Vec3(0.0)


@pytest.mark.parametrize("a", _VEC3_SMALL)
@pytest.mark.parametrize("b", _VEC3_BIG)
def test_vec3_ge_false(a, b):
    assert not (Vec3(*a) >= Vec3(*b))


@pytest.mark.parametrize(
    "b, expected",
    [((1, 1, 1), True), ((1, 0, 0), False), ((0, 1, 0), False), ((0, 0, 1), False)],
)
def test_vec3_lt(b, expected):
    assert (Vec3(0.0) < Vec3(*b)) is expected


@pytest.mark.parametrize("b", _VEC3_SMALL)
def test_vec3_le_true(b):
    assert Vec3(0.0) <= Vec3(*b)


@pytest.mark.parametrize("a", _VEC3_BIG)
@pytest.mark.parametrize("b", _VEC3_SMALL)
def test_vec3_le_false(a, b):
    assert not (Vec3(*a) <= Vec3(*b))


def test_vec4_construction():
    assert Vec4() == Vec4(0.0, 0.0, 0.0, 0.0)
    assert Vec4(2.0) == Vec4(2.0, 2.0, 2.0, 2.0)
    assert Vec4.from_vec2(Vec2(1.0, 2.0), 3.0, 4.0) == Vec4(1.0, 2.0, 3.0, 4.0)
    assert Vec4.from_vec3(Vec3(1.0, 2.0, 3.0), 4.0) == Vec4(1.0, 2.0, 3.0, 4.0)
    assert Vec4(1.0, 2.0, 3.0, 4.0) - Vec4(1.0) == Vec4(0.0, 1.0, 2.0, 3.0)
    assert Vec4(1.0) < Vec4(2.0)


def _assert_identity(m, diagonal):
    for col in range(4):
        for row in range(4):
            assert m[col, row] == (diagonal if col == row else 0.0)


def test_mat4_identity():
    _assert_identity(Mat4(), 1.0)


def test_mat4_identity_scalar():
    _assert_identity(Mat4(2), 2.0)


def test_mat4_element_access():
    m = Mat4()
    for col in range(4):
        for row in range(4):
            m[col, row] = col * 4 + row + 1.0
    assert list(m) == [float(v) for v in range(1, 17)]
    assert m[0, 1] == 2.0
    assert m[1, 0] == 5.0
    assert m[3, 3] == 16.0
    assert m[14] == 15.0


def test_mat4_reassign_to_identity():
    m = Mat4([float(v) for v in range(1, 17)])
    assert m[2, 3] == 12.0
    m = Mat4()
    _assert_identity(m, 1.0)


def test_mat4_equality_and_errors():
    assert Mat4(3.0) == Mat4(3.0)
    assert not (Mat4(3.0) == Mat4())
    with pytest.raises(ValueError):
        Mat4([1.0, 2.0])
    with pytest.raises(IndexError):
        Mat4()[4, 0]


def test_running_avg_initial_state():
    avg = RunningAverage(10)
    assert avg.count == 10
    assert avg.dirty is False
    assert avg.cursor == 0
    assert avg.avg() == 0.0


def test_running_avg_empty():
    avg = RunningAverage(1)
    assert avg.avg() == 0.0
    assert avg.dirty is False


def test_running_avg_cursor_and_dirty():
    avg = RunningAverage(1)
    avg.add(2.0)
    assert avg.cursor == 1
    assert avg.dirty is True


def test_running_avg_buffer():
    avg = RunningAverage(2)
    avg.add(2.0)
    avg.add(4.0)
    assert avg.samples() == (2.0, 4.0)


def test_running_avg_rolling_buffer():
    avg = RunningAverage(2)
    avg.add(2.0)
    avg.add(4.0)
    assert avg.samples() == (2.0, 4.0)
    avg.add(6.0)
    assert avg.samples() == (6.0, 4.0)
    avg.add(8.0)
    assert avg.samples() == (6.0, 8.0)
    avg.add(10.0)
    assert avg.samples() == (10.0, 8.0)


def test_running_avg_avg():
    avg = RunningAverage(2)
    assert avg.avg() == 0.0
    avg.add(2.0)
    assert avg.avg() == 2.0
    avg.add(4.0)
    assert avg.avg() == 3.0


def test_running_avg_plus_operator():
    val = 1.3
    avg = RunningAverage(2)
    avg += val
    assert avg.samples()[0] == val


def test_running_avg_rejects_zero_count():
    with pytest.raises(ValueError):
        RunningAverage(0)


def test_smooth_float_initial():
    f = SmoothFloat()
    assert (f.agility, f.current, f.target) == (1.0, 0.0, 0.0)


def test_smooth_float_initial_with_agility():
    f = SmoothFloat(2.0)
    assert (f.agility, f.current, f.target) == (2.0, 0.0, 0.0)


def test_smooth_float_initial_with_agility_and_target():
    f = SmoothFloat(2.0, 3.0)
    assert (f.agility, f.current, f.target) == (2.0, 0.0, 3.0)


def test_smooth_float_copy():
    f2 = copy.copy(SmoothFloat(2.0, 3.0))
    assert (f2.agility, f2.current, f2.target) == (2.0, 0.0, 3.0)


def test_smooth_float_plus_equals():
    f = SmoothFloat(2.0, 3.0)
    assert f.target == 3.0
    f += 5.0
    assert f.target == 8.0


def test_smooth_float_minus_equals():
    f = SmoothFloat(2.0, 3.0)
    f -= 5.0
    assert f.target == -2.0


def test_smooth_float_as_float():
    f = SmoothFloat(2.0, 3.0)
    assert float(f) == 0.0
    f.current = 20.0
    assert float(f) == 20.0


def test_smooth_float_force():
    f = SmoothFloat(2.0, 3.0)
    assert f.current == 0.0
    f.force()
    assert f.current == 3.0
    assert f.target == 3.0


def test_smooth_float_force_with_value():
    f = SmoothFloat(2.0, 3.0)
    f.force(15.0)
    assert f.current == 15.0
    assert f.target == 15.0


def test_smooth_float_update():
    agility, target, dt = 2.0, 3.0, 0.25
    f = SmoothFloat(agility, target)
    assert f.current == 0.0
    f.update(dt)
    assert f.current == target * agility * dt