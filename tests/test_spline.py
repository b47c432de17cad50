"""
spline 模块单元测试
"""

import numpy as np
import pytest

from keyframe_splines import (
    Bezier,
    CapacityError,
    CatmullRom,
    Cosine,
    Hermite,
    InsufficientKeyframesError,
    Keyframe,
    Linear,
    OutOfBoundsError,
    OutOfRangeError,
    SampledWithKey,
    Spline,
    SplineError,
    Step,
)
from keyframe_splines.datasets import color_keys, hold_keys, ramp_keys, ramp_reference


class TestConstruction:
    """样条构造测试"""

    def test_empty(self):
        spline = Spline()
        assert len(spline) == 0
        assert spline.is_empty
        assert spline.capacity is None

    def test_auto_sort(self):
        """测试构造时自动排序"""
        keys = [Keyframe(2.0, 0.0), Keyframe(0.0, 1.0), Keyframe(1.0, 2.0)]
        spline = Spline(keys)
        assert [k.t for k in spline] == [0.0, 1.0, 2.0]

    def test_stable_sort_for_equal_parameters(self):
        """测试参数相同的关键帧保持原有顺序"""
        keys = [Keyframe(1.0, 10.0), Keyframe(0.0, 0.0), Keyframe(1.0, 20.0)]
        spline = Spline(keys)
        assert [k.value for k in spline] == [0.0, 10.0, 20.0]

    def test_rejects_non_keyframes(self):
        with pytest.raises(TypeError):
            Spline([(0.0, 1.0)])

    def test_capacity_exceeded(self):
        with pytest.raises(CapacityError):
            Spline(ramp_keys(), capacity=2)

    def test_negative_capacity(self):
        with pytest.raises(ValueError):
            Spline(capacity=-1)

    def test_domain(self):
        assert Spline(ramp_keys()).domain == (0.0, 2.0)

    def test_domain_empty(self):
        with pytest.raises(InsufficientKeyframesError):
            Spline().domain

    def test_repr(self):
        assert "N=3" in repr(Spline(ramp_keys()))
        assert "N=0" in repr(Spline())


class TestMutation:
    """增删改测试"""

    @pytest.fixture
    def spline(self):
        return Spline(ramp_keys())

    def test_add_keeps_order(self, spline):
        spline.add(Keyframe(0.5, 7.0))
        assert [k.t for k in spline] == [0.0, 0.5, 1.0, 2.0]
        assert spline.sample(0.5) == 7.0

    def test_add_after_equal_parameter(self, spline):
        """测试参数相同时插在已有关键帧之后"""
        spline.add(Keyframe(1.0, 99.0))
        assert spline[1].value == 10.0
        assert spline[2].value == 99.0

    def test_add_chaining(self):
        spline = Spline().add(Keyframe(0.0, 0.0)).add(Keyframe(1.0, 1.0))
        assert len(spline) == 2

    def test_add_rejects_non_keyframe(self, spline):
        with pytest.raises(TypeError):
            spline.add(3.0)

    def test_fixed_capacity(self):
        """测试固定容量模式"""
        spline = Spline(capacity=2)
        spline.add(Keyframe(0.0, 0.0))
        spline.add(Keyframe(1.0, 1.0))
        with pytest.raises(CapacityError) as info:
            spline.add(Keyframe(2.0, 2.0))
        assert info.value.capacity == 2
        assert len(spline) == 2

    def test_capacity_freed_by_remove(self):
        spline = Spline(ramp_keys(), capacity=3)
        spline.remove(0)
        spline.add(Keyframe(-1.0, 0.0))
        assert len(spline) == 3

    def test_get(self, spline):
        assert spline.get(1).value == 10.0
        assert spline[2].t == 2.0

    @pytest.mark.parametrize("index", [3, -1, 100])
    def test_get_out_of_bounds(self, spline, index):
        """测试下标越界 (不接受负下标)"""
        with pytest.raises(OutOfBoundsError) as info:
            spline.get(index)
        assert info.value.length == 3

    def test_remove(self, spline):
        removed = spline.remove(1)
        assert removed.value == 10.0
        assert len(spline) == 2
        assert spline.sample(1.0) == 0.0

    def test_remove_out_of_bounds(self, spline):
        with pytest.raises(OutOfBoundsError):
            spline.remove(3)

    def test_replace_value(self, spline):
        old = spline.replace(1, lambda k: k.with_value(20.0))
        assert old.value == 10.0
        assert spline.sample(0.5) == 10.0

    def test_replace_resorts(self, spline):
        """测试替换参数后重新排序"""
        spline.replace(0, lambda k: Keyframe(3.0, k.value))
        assert [k.t for k in spline] == [1.0, 2.0, 3.0]

    def test_replace_rejects_non_keyframe(self, spline):
        with pytest.raises(TypeError):
            spline.replace(0, lambda k: None)

    def test_keys_view_is_read_only(self, spline):
        keys = spline.keys
        assert isinstance(keys, tuple)
        assert len(keys) == 3


class TestSampling:
    """采样测试"""

    @pytest.fixture
    def spline(self):
        return Spline(ramp_keys())

    def test_reference_values(self, spline):
        """测试折线参考值"""
        reference = ramp_reference()
        for t, expected in reference.samples.items():
            assert spline.sample(t) == expected

    def test_out_of_range(self, spline):
        for t in ramp_reference().out_of_range:
            with pytest.raises(OutOfRangeError):
                spline.sample(t)

    def test_clamped(self, spline):
        """测试钳制采样返回端点值"""
        assert spline.sample_clamped(-1.0) == 0.0
        assert spline.sample_clamped(-1e9) == 0.0
        assert spline.sample_clamped(3.0) == 0.0
        assert spline.sample_clamped(0.5) == 5.0

    def test_errors_share_base(self, spline):
        with pytest.raises(SplineError):
            spline.sample(10.0)
        with pytest.raises(ValueError):
            spline.sample(10.0)

    def test_sample_with_key(self, spline):
        assert spline.sample_with_key(1.5) == SampledWithKey(5.0, 1)
        assert spline.sample_with_key(2.0).index == 2

    def test_sample_clamped_with_key(self, spline):
        assert spline.sample_clamped_with_key(-3.0) == SampledWithKey(0.0, 0)
        assert spline.sample_clamped_with_key(5.0) == SampledWithKey(0.0, 2)

    def test_empty_spline(self):
        """测试空样条采样"""
        spline = Spline()
        with pytest.raises(InsufficientKeyframesError):
            spline.sample(0.0)
        with pytest.raises(InsufficientKeyframesError):
            spline.sample_clamped(0.0)

    def test_single_key(self):
        """测试单关键帧：仅在其参数处有值"""
        spline = Spline([Keyframe(1.0, 4.0)])
        assert spline.sample(1.0) == 4.0
        assert spline.sample_clamped(-5.0) == 4.0
        with pytest.raises(OutOfRangeError):
            spline.sample(1.5)

    def test_catmull_rom_needs_four_keys(self):
        """测试 Catmull-Rom 关键帧不足"""
        spline = Spline([Keyframe(float(i), float(i), CatmullRom()) for i in range(3)])
        with pytest.raises(InsufficientKeyframesError) as info:
            spline.sample(0.5)
        assert info.value.required == 4
        assert info.value.available == 3

    def test_catmull_rom_last_key_kind_unused(self):
        """测试最后一个关键帧的插值方式不影响采样"""
        spline = Spline([Keyframe(0.0, 0.0, Linear()), Keyframe(1.0, 2.0, CatmullRom())])
        assert spline.sample(0.5) == 1.0
        assert spline.sample(1.0) == 2.0

    def test_mixed_kinds(self):
        """测试各区间使用各自的插值方式"""
        spline = Spline([
            Keyframe(0.0, 0.0, Step()),
            Keyframe(1.0, 10.0, Linear()),
            Keyframe(2.0, 20.0, Cosine()),
            Keyframe(3.0, 30.0, Linear()),
        ])
        assert spline.sample(0.5) == 0.0
        assert spline.sample(1.5) == 15.0
        assert np.isclose(spline.sample(2.25), 20.0 + 10.0 * (1 - np.cos(0.25 * np.pi)) / 2)

    def test_step_right_value_owned_by_next_segment(self):
        """测试阶跃：右值只在下一区间起点出现"""
        spline = Spline([Keyframe(0.0, 1.0, Step()), Keyframe(1.0, 2.0, Step()), Keyframe(2.0, 3.0)])
        for t in np.linspace(0.0, 0.999, 10):
            assert spline.sample(t) == 1.0
        assert spline.sample(1.0) == 2.0

    def test_step_threshold(self):
        spline = Spline([Keyframe(0.0, 1.0, Step(0.5)), Keyframe(2.0, 2.0)])
        assert spline.sample(0.9) == 1.0
        assert spline.sample(1.0) == 2.0

    def test_hold_with_duplicate_parameters(self):
        """测试零长度区间不报错"""
        spline = Spline(hold_keys())
        assert spline.sample(1.999) == 1.0
        assert spline.sample(2.0) == 5.0
        assert spline.sample(3.0) == 5.0
        assert spline.sample(4.0) == 7.0

    def test_linear_monotonic(self, spline):
        values = [spline.sample(t) for t in np.linspace(0.0, 1.0, 21)]
        assert np.all(np.diff(values) > 0)

    def test_vector_values(self):
        """测试向量控制值"""
        spline = Spline(color_keys())
        np.testing.assert_allclose(spline.sample(0.25), [0.5, 0.5, 0.0])
        np.testing.assert_allclose(spline.sample(0.75), [0.0, 0.5, 0.5])


class TestExactHits:
    """关键帧处精确取值测试"""

    @pytest.mark.parametrize("kind", [Step(), Step(0.3), Linear(), Cosine(), Bezier(), CatmullRom(), Hermite()])
    def test_scalar(self, kind):
        ts = [0.0, 0.7, 1.5, 4.0, 4.2]
        vs = [3.0, -1.25, 8.5, 0.1, 2.0]
        spline = Spline([Keyframe(t, v, kind, tangent_in=1.5, tangent_out=-0.5) for t, v in zip(ts, vs)])
        for t, v in zip(ts, vs):
            assert spline.sample(t) == v

    @pytest.mark.parametrize("kind", [Step(), Linear(), Cosine(), Bezier(), CatmullRom(), Hermite()])
    def test_vector(self, kind):
        rng = np.random.default_rng(7)
        ts = np.cumsum(rng.uniform(0.1, 1.0, size=6))
        vs = rng.normal(size=(6, 3))
        spline = Spline([Keyframe(t, v, kind) for t, v in zip(ts, vs)])
        for t, v in zip(ts, vs):
            np.testing.assert_array_equal(spline.sample(t), v)


class TestBatchSampling:
    """批量采样测试"""

    def test_scalar_batch(self):
        spline = Spline(ramp_keys())
        values = spline.sample_batch([0.0, 0.5, 1.0, 1.5, 2.0])
        np.testing.assert_allclose(values, [0.0, 5.0, 10.0, 5.0, 0.0])
        assert values.shape == (5,)

    def test_batch_matches_single(self):
        spline = Spline([Keyframe(float(i), float(i % 3), CatmullRom()) for i in range(6)])
        t_values = np.linspace(0.0, 5.0, 23)
        expected = [spline.sample(t) for t in t_values]
        np.testing.assert_array_equal(spline.sample_batch(t_values), expected)

    def test_vector_batch_shape(self):
        spline = Spline(color_keys())
        values = spline.sample_batch(np.linspace(0.0, 1.0, 9))
        assert values.shape == (9, 3)

    def test_batch_out_of_range(self):
        spline = Spline(ramp_keys())
        with pytest.raises(OutOfRangeError):
            spline.sample_batch([0.5, 3.0])

    def test_batch_nan(self):
        spline = Spline(ramp_keys())
        with pytest.raises(OutOfRangeError):
            spline.sample_batch([np.nan], clamped=True)

    def test_batch_clamped(self):
        """测试批量钳制采样"""
        spline = Spline(ramp_keys())
        values = spline.sample_batch([-1.0, 0.5, 3.0], clamped=True)
        np.testing.assert_allclose(values, [0.0, 5.0, 0.0])

    def test_batch_empty_spline(self):
        with pytest.raises(InsufficientKeyframesError):
            Spline().sample_batch([0.0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
