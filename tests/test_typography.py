"""
Tests for fluid typography (font-size steps and clamp generation)
"""
import pytest

from figma_variables.errors import ViewportConfigError
from figma_variables.typography import (
    FontSizeStep,
    collect_font_size_steps,
    deduplicate_steps,
    format_number,
    generate_clamp,
    process_font_sizes,
    renumber_steps,
    to_fixed,
)

VIEWPORT = {'viewport-min-width': '"320"', 'viewport-max-width': '"1280"'}


class TestGenerateClamp:
    """Tests for generate_clamp"""

    def test_clamp_for_default_viewport(self):
        assert generate_clamp(320, 1280, 1.125, 1.25) == \
            'clamp(1.125rem, 1.0833rem + 0.2083vw, 1.25rem)'

    def test_clamp_for_mobile_viewport(self):
        assert generate_clamp(390, 1440, 1.125, 1.25) == \
            'clamp(1.125rem, 1.0786rem + 0.1905vw, 1.25rem)'

    def test_whole_numbers_have_no_decimals(self):
        assert generate_clamp(320, 1280, 1.0, 2.0) == \
            'clamp(1rem, 0.6667rem + 1.6667vw, 2rem)'

    def test_equal_sizes_give_flat_clamp(self):
        assert generate_clamp(320, 1280, 1.0, 1.0) == \
            'clamp(1rem, 1.0000rem + 0.0000vw, 1rem)'

    def test_equal_viewport_widths_are_rejected(self):
        with pytest.raises(ViewportConfigError):
            generate_clamp(320, 320, 1.0, 2.0)

    def test_halves_round_up(self):
        assert generate_clamp(256, 1280, 1.0, 1.5) == \
            'clamp(1rem, 0.8750rem + 0.7813vw, 1.5rem)'


class TestToFixed:

    @pytest.mark.parametrize('value, expected', [
        (0.78125, '0.7813'),
        (0.875, '0.8750'),
        (1.0, '1.0000'),
        (-0.0, '0.0000'),
        (-0.125, '-0.1250'),
    ])
    def test_four_decimals(self, value, expected):
        assert to_fixed(value) == expected


class TestFormatNumber:

    @pytest.mark.parametrize('value, expected', [
        (1.0, '1'),
        (1.125, '1.125'),
        (0.875, '0.875'),
        (12.0, '12'),
    ])
    def test_shortest_form(self, value, expected):
        assert format_number(value) == expected


class TestCollectFontSizeSteps:
    """Tests for pairing min and max steps"""

    def test_pairs_min_with_following_max(self):
        css = (
            '--font-size-min-step-0-rem: 1.125rem;\n'
            '--font-size-max-step-0-rem: 1.25rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(0, 1.125, 1.25)]

    def test_max_within_four_lines(self):
        css = (
            '--font-size-min-step-1-rem: 1.25rem;\n'
            '--font-size-mid-step-1: 21px;\n'
            '--font-size-min-step-1: 20px;\n'
            '--font-size-max-step-1: 24px;\n'
            '--font-size-max-step-1-rem: 1.5rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(1, 1.25, 1.5)]

    def test_max_too_far_away_is_not_paired(self):
        css = '--font-size-min-step-1-rem: 1.25rem;\n' + '--x: 1;\n' * 4 + \
            '--font-size-max-step-1-rem: 1.5rem;\n'
        assert collect_font_size_steps(css) == [FontSizeStep(1, 1.25, None)]

    def test_max_of_another_step_is_not_paired(self):
        css = (
            '--font-size-min-step-1-rem: 1.25rem;\n'
            '--font-size-max-step-2-rem: 1.5rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(1, 1.25, None)]

    def test_trailing_decimal_point(self):
        css = (
            '--font-size-min-step-0-rem: 1.rem;\n'
            '--font-size-max-step-0-rem: 1.5rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(0, 1.0, 1.5)]

    def test_malformed_min_is_skipped(self):
        css = (
            '--font-size-min-step-0-rem: 1.2.3rem;\n'
            '--font-size-max-step-0-rem: 1.5rem;\n'
            '--font-size-min-step-1-rem: 1.25rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(1, 1.25, None)]

    def test_malformed_max_is_not_paired(self):
        css = (
            '--font-size-min-step-0-rem: 1.125rem;\n'
            '--font-size-max-step-0-rem: 1..5rem;\n'
        )
        assert collect_font_size_steps(css) == [FontSizeStep(0, 1.125, None)]


class TestStepNumbering:
    """Tests for deduplication and renumbering"""

    def test_duplicate_pairs_keep_first(self):
        steps = [FontSizeStep(3, 1.0, 1.1), FontSizeStep(4, 1.0, 1.1), FontSizeStep(5, 1.0, None)]
        assert deduplicate_steps(steps) == [FontSizeStep(3, 1.0, 1.1), FontSizeStep(5, 1.0, None)]

    def test_steps_below_zero_become_negative(self):
        steps = [FontSizeStep(5, 0.75, 0.8), FontSizeStep(4, 0.875, 0.9),
                 FontSizeStep(0, 1.0, 1.1), FontSizeStep(1, 1.25, 1.5)]
        numbered = [number for number, _ in renumber_steps(steps)]
        assert numbered == [-2, -1, 0, 1]

    def test_steps_above_zero_keep_original_number(self):
        steps = [FontSizeStep(0, 1.0, 1.1), FontSizeStep(3, 1.25, 1.5), FontSizeStep(7, 2.0, 3.0)]
        numbered = [number for number, _ in renumber_steps(steps)]
        assert numbered == [0, 3, 7]

    def test_without_step_zero_numbers_are_kept(self):
        steps = [FontSizeStep(2, 1.0, 1.1), FontSizeStep(1, 1.25, 1.5)]
        numbered = [number for number, _ in renumber_steps(steps)]
        assert numbered == [2, 1]


class TestProcessFontSizes:
    """Tests for process_font_sizes"""

    def test_generates_sorted_steps(self, viewport_css):
        css = viewport_css + (
            '--font-size-min-step-1-rem: 1.25rem;\n'
            '--font-size-max-step-1-rem: 1.5rem;\n'
            '--font-size-min-step-0-rem: 1.125rem;\n'
            '--font-size-max-step-0-rem: 1.25rem;\n'
            '--font-size-min-step-2-rem: 0.875rem;\n'
            '--font-size-max-step-2-rem: 0.9rem;\n'
        )
        font_sizes = process_font_sizes(VIEWPORT, css)
        assert list(font_sizes) == ['font-size-step--1', 'font-size-step-0', 'font-size-step-1']
        assert font_sizes['font-size-step-0'] == 'clamp(1.125rem, 1.0833rem + 0.2083vw, 1.25rem)'

    def test_unpaired_min_is_emitted_as_rem(self, viewport_css):
        css = viewport_css + '--font-size-min-step-0-rem: 1.5rem;\n'
        assert process_font_sizes(VIEWPORT, css) == {'font-size-step-0': '1.5rem'}

    def test_missing_viewport_is_fatal(self):
        with pytest.raises(ViewportConfigError, match='viewport-max-width'):
            process_font_sizes({'viewport-min-width': '"320"'}, '')

    def test_non_numeric_viewport_is_fatal(self):
        variables = {'viewport-min-width': '"wide"', 'viewport-max-width': '"1280"'}
        with pytest.raises(ViewportConfigError, match='not a number'):
            process_font_sizes(variables, '')

    def test_no_steps(self):
        assert process_font_sizes(VIEWPORT, '') == {}
