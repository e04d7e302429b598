# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Tests for the synchronized hex/HSL editor state."""

import pytest

from themecraft.color.editor import ColorEditorState


class TestColorEditorState:

    def test_from_hex(self):
        state = ColorEditorState.from_hex("#ff0000")
        assert state.hex == "#FF0000"
        assert (state.hue, state.saturation, state.lightness) == (0.0, 100.0, 50.0)

    def test_from_invalid_hex(self):
        assert ColorEditorState.from_hex("#ff00") is None

    def test_typed_hex_recomputes_hsl(self):
        state = ColorEditorState.from_hex("#FF0000").with_hex("#0000FF")
        assert state.hex == "#0000FF"
        assert state.hue == pytest.approx(240.0)

    def test_incomplete_hex_keeps_state(self):
        state = ColorEditorState.from_hex("#FF0000")
        assert state.with_hex("#12") is state

    def test_hue_slider(self):
        state = ColorEditorState.from_hex("#FF0000").with_hsl(hue=120)
        assert state.hex == "#00FF00"
        assert state.saturation == 100.0

    def test_hue_wraps(self):
        state = ColorEditorState.from_hex("#FF0000").with_hsl(hue=-120)
        assert state.hue == pytest.approx(240.0)
        assert state.hex == "#0000FF"

    def test_lightness_extremes(self):
        state = ColorEditorState.from_hex("#FF0000")
        assert state.with_hsl(lightness=100).hex == "#FFFFFF"
        assert state.with_hsl(lightness=0).hex == "#000000"

    def test_components_clamped(self):
        state = ColorEditorState.from_hex("#808080").with_hsl(saturation=150, lightness=-20)
        assert state.saturation == 100.0
        assert state.lightness == 0.0

    def test_immutable(self):
        state = ColorEditorState.from_hex("#FF0000")
        with pytest.raises(AttributeError):
            state.hex = "#000000"
