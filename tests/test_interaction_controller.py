"""
Tests for the InteractionController.

Covers:
- Press/drag/release with the drag threshold
- Background click and middle-button pan
- Wheel zoom and reserved modifiers
- Paste placement
- Keyboard movement, delete and z-order shortcuts
"""
import pytest

from models.events import (
    PointerEvent, PointerKind, PointerButton,
    KeyEvent, KeyKind, WheelEvent, PasteImageEvent
)


def press(x, y, layer_id=None, button=PointerButton.PRIMARY):
    return PointerEvent(PointerKind.PRESS, x, y, button=button, layer_id=layer_id)


def move(x, y):
    return PointerEvent(PointerKind.MOVE, x, y)


def release(x, y, button=PointerButton.PRIMARY):
    return PointerEvent(PointerKind.RELEASE, x, y, button=button)


def key_down(key, *modifiers):
    return KeyEvent(KeyKind.DOWN, key, frozenset(modifiers))


def key_up(key, *modifiers):
    return KeyEvent(KeyKind.UP, key, frozenset(modifiers))


@pytest.fixture
def layer_id(store):
    """One 100x100 layer at the content origin"""
    return store.add_layer("img", 100, 100, 0, 0)


# ══════════════════════════════════════════════════════════════════════════
# Pointer
# ══════════════════════════════════════════════════════════════════════════

class TestPointerDrag:

    def test_press_focuses_without_dragging(self, controller, store, layer_id):
        store.set_focus(None)
        assert controller.handle_pointer(press(10, 10, layer_id))
        assert store.focused_layer_id == layer_id
        assert store.dragging_layer_id is None

    def test_small_move_does_not_start_drag(self, controller, store, layer_id):
        controller.handle_pointer(press(10, 10, layer_id))
        assert controller.handle_pointer(move(13, 14)) is False
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (0, 0)
        assert store.dragging_layer_id is None

    def test_move_exactly_at_threshold_is_still_a_click(self, controller, store, layer_id):
        controller.handle_pointer(press(10, 10, layer_id))
        controller.handle_pointer(move(15, 10))
        assert store.dragging_layer_id is None

    def test_crossing_threshold_applies_full_delta(self, controller, store, layer_id):
        controller.handle_pointer(press(10, 10, layer_id))
        controller.handle_pointer(move(13, 10))
        assert controller.handle_pointer(move(20, 10))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (10, 0)
        assert store.dragging_layer_id == layer_id
        assert controller.is_dragging

    def test_subsequent_moves_are_incremental(self, controller, store, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(10, 0))
        controller.handle_pointer(move(12, 3))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (12, 3)

    def test_drag_delta_is_divided_by_scale(self, controller, store, viewport, layer_id):
        viewport.set_zoom_percent(200)
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(20, -10))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (10, -5)

    def test_release_clears_dragging(self, controller, store, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(30, 0))
        assert controller.handle_pointer(release(30, 0))
        assert store.dragging_layer_id is None
        assert store.focused_layer_id == layer_id
        assert controller.drag_context is None

    def test_click_only_focuses(self, controller, store, layer_id):
        other = store.add_layer("other", 10, 10, 500, 500)
        assert store.focused_layer_id == other
        controller.handle_pointer(press(5, 5, layer_id))
        controller.handle_pointer(release(5, 5))
        assert store.focused_layer_id == layer_id
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (0, 0)

    def test_background_press_clears_focus(self, controller, store, layer_id):
        assert controller.handle_pointer(press(500, 500, None))
        assert store.focused_layer_id is None

    def test_press_on_unknown_layer_clears_focus(self, controller, store, layer_id):
        controller.handle_pointer(press(5, 5, 999))
        assert store.focused_layer_id is None

    def test_move_without_press_is_ignored(self, controller, store, layer_id):
        assert controller.handle_pointer(move(50, 50)) is False

    def test_secondary_button_is_ignored(self, controller, store, layer_id):
        store.set_focus(None)
        assert controller.handle_pointer(press(5, 5, layer_id, PointerButton.SECONDARY)) is False
        assert store.focused_layer_id is None

    def test_keyboard_delete_while_dragging_ends_the_drag(self, controller, store, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(30, 0))
        controller.handle_key(key_down('Delete'))
        assert store.dragging_layer_id is None
        assert controller.drag_context is None
        assert controller.handle_pointer(move(60, 0)) is False
        assert store.dragging_layer_id is None

    def test_keyboard_delete_before_threshold_never_starts_a_drag(self, controller, store, layer_id):
        controller.handle_pointer(press(5, 5, layer_id))
        controller.handle_key(key_down('Delete'))
        assert controller.handle_pointer(move(40, 5)) is False
        assert store.focused_layer_id is None
        assert store.dragging_layer_id is None

    def test_store_delete_before_threshold_drops_the_gesture(self, controller, store, layer_id):
        controller.handle_pointer(press(5, 5, layer_id))
        store.delete_layer(layer_id)
        assert controller.handle_pointer(move(40, 5)) is False
        assert store.dragging_layer_id is None
        assert controller.drag_context is None

    def test_dragged_layer_is_always_the_focused_layer(self, controller, store, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(30, 0))
        assert store.dragging_layer_id == store.focused_layer_id == layer_id


class TestPan:

    def test_middle_press_during_layer_drag_is_ignored(self, controller, store, viewport, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(30, 0))
        assert controller.handle_pointer(press(30, 0, button=PointerButton.MIDDLE)) is False
        controller.handle_pointer(release(30, 0, PointerButton.MIDDLE))
        assert store.dragging_layer_id == layer_id
        assert controller.handle_pointer(release(30, 0))
        assert store.dragging_layer_id is None
        assert tuple(viewport.offset) == (0, 0)

    def test_pan_works_again_after_layer_release(self, controller, viewport, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(release(0, 0))
        assert controller.handle_pointer(press(0, 0, button=PointerButton.MIDDLE))
        controller.handle_pointer(move(7, 3))
        assert tuple(viewport.offset) == (7, 3)

    def test_middle_button_pans_in_screen_pixels(self, controller, viewport, store, layer_id):
        viewport.set_zoom_percent(200)
        controller.handle_pointer(press(100, 100, button=PointerButton.MIDDLE))
        controller.handle_pointer(move(110, 95))
        assert tuple(viewport.offset) == (10, -5)
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (0, 0)

    def test_pan_ends_on_middle_release(self, controller, viewport):
        controller.handle_pointer(press(0, 0, button=PointerButton.MIDDLE))
        assert controller.handle_pointer(release(0, 0, PointerButton.PRIMARY)) is False
        assert controller.handle_pointer(release(0, 0, PointerButton.MIDDLE))
        controller.handle_pointer(move(50, 50))
        assert tuple(viewport.offset) == (0, 0)


class TestWheel:

    def test_positive_delta_zooms_in(self, controller, viewport):
        assert controller.handle_wheel(WheelEvent(120, 10, 10))
        assert viewport.zoom_percent == 110

    def test_negative_delta_zooms_out(self, controller, viewport):
        assert controller.handle_wheel(WheelEvent(-120, 10, 10))
        assert viewport.zoom_percent == 90

    @pytest.mark.parametrize('modifier', ['ctrl', 'meta'])
    def test_reserved_modifiers_are_ignored(self, controller, viewport, modifier):
        assert controller.handle_wheel(WheelEvent(120, 10, 10, frozenset({modifier}))) is False
        assert viewport.scale == 1.0

    def test_shift_wheel_still_zooms(self, controller, viewport):
        assert controller.handle_wheel(WheelEvent(120, 10, 10, frozenset({'shift'})))

    def test_zoom_keeps_point_under_cursor(self, controller, viewport):
        from models.transform import Vec2
        before = viewport.screen_to_content(Vec2(40, 60))
        controller.handle_wheel(WheelEvent(120, 40, 60))
        after = viewport.screen_to_content(Vec2(40, 60))
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)


# ══════════════════════════════════════════════════════════════════════════
# Paste
# ══════════════════════════════════════════════════════════════════════════

class TestPaste:

    def test_explicit_position(self, controller, store):
        layer_id = controller.handle_paste(PasteImageEvent("img", 20, 10, x=7, y=8))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (7, 8)
        assert store.focused_layer_id == layer_id

    def test_centred_in_viewport(self, controller, store):
        layer_id = controller.handle_paste(PasteImageEvent("img", 20, 10), viewport_size=(400, 300))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (190, 145)

    def test_centred_accounts_for_pan_and_zoom(self, controller, store, viewport):
        viewport.set_zoom_percent(200)
        viewport.pan(100, 100)
        layer_id = controller.handle_paste(PasteImageEvent("img", 20, 10), viewport_size=(400, 300))
        layer = store.get_layer(layer_id)
        # Centre (200, 150) on screen is content ((200-100)/2, (150-100)/2)
        assert (layer.x, layer.y) == (40, 20)

    def test_default_position_without_size(self, controller, store):
        layer = store.get_layer(controller.handle_paste(PasteImageEvent("img", 20, 10)))
        assert (layer.x, layer.y) == (50, 50)

    def test_paste_goes_on_top(self, controller, store, layer_id):
        new_id = controller.handle_paste(PasteImageEvent("img", 20, 10, x=0, y=0))
        assert store.layers_in_paint_order()[-1].id == new_id

    def test_handle_event_routes_paste(self, controller, store):
        assert controller.handle_event(PasteImageEvent("img", 5, 5, x=0, y=0))
        assert store.layer_count() == 1

    def test_handle_event_rejects_unknown_types(self, controller):
        with pytest.raises(TypeError):
            controller.handle_event("not an event")


# ══════════════════════════════════════════════════════════════════════════
# Keyboard
# ══════════════════════════════════════════════════════════════════════════

class TestKeyboardMovement:

    def test_no_focus_ignores_keys(self, controller, store, layer_id):
        store.set_focus(None)
        assert controller.handle_key(key_down('w')) is False
        assert store.is_keyboard_moving is False

    @pytest.mark.parametrize('key, expected', [
        ('w', (0, -1)),
        ('a', (-1, 0)),
        ('s', (0, 1)),
        ('d', (1, 0)),
    ])
    def test_single_step(self, controller, store, layer_id, key, expected):
        controller.handle_key(key_down(key))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == expected

    def test_uppercase_key_maps_to_movement(self, controller, store, layer_id):
        assert controller.handle_key(key_down('D'))
        assert store.get_layer(layer_id).x == 1

    def test_shift_moves_ten(self, controller, store, layer_id):
        controller.handle_key(key_down('d', 'shift'))
        assert store.get_layer(layer_id).x == 10

    def test_movement_ignores_zoom(self, controller, store, viewport, layer_id):
        viewport.set_zoom_percent(300)
        controller.handle_key(key_down('s'))
        assert store.get_layer(layer_id).y == 1

    def test_repeat_keeps_moving(self, controller, store, layer_id):
        for _ in range(3):
            controller.handle_key(KeyEvent(KeyKind.DOWN, 'd', is_repeat=True))
        assert store.get_layer(layer_id).x == 3

    def test_moving_flag_tracks_all_held_keys(self, controller, store, layer_id):
        flags = []
        controller.handle_key(key_down('w'))
        flags.append(store.is_keyboard_moving)
        controller.handle_key(key_down('a'))
        flags.append(store.is_keyboard_moving)
        controller.handle_key(key_up('w'))
        flags.append(store.is_keyboard_moving)
        controller.handle_key(key_up('a'))
        flags.append(store.is_keyboard_moving)
        assert flags == [True, True, True, False]

    def test_release_of_untracked_key_is_ignored(self, controller, store, layer_id):
        assert controller.handle_key(key_up('w')) is False

    def test_custom_movement_keys(self, store, viewport, config, layer_id):
        from actions.interaction_controller import InteractionController
        config.movement_keys = {'ArrowLeft': (-1, 0)}
        controller = InteractionController(store, viewport, config)
        assert controller.handle_key(key_down('ArrowLeft'))
        assert store.get_layer(layer_id).x == -1
        assert controller.handle_key(key_down('a')) is False


class TestKeyboardCommands:

    @pytest.mark.parametrize('key', ['Delete', 'Backspace'])
    def test_delete_removes_focused_layer(self, controller, store, layer_id, key):
        assert controller.handle_key(key_down(key))
        assert store.layer_count() == 0
        assert store.focused_layer_id is None

    def test_delete_short_circuits(self, controller, store, layer_id):
        # Nothing else runs for the same event, even with modifiers held
        controller.handle_key(key_down('Delete', 'shift', 'alt'))
        assert store.is_keyboard_moving is False

    def test_arrow_up_steps_up(self, controller, store, layers_with_z):
        a, b, c = layers_with_z(1, 2, 3)
        store.set_focus(a)
        assert controller.handle_key(key_down('ArrowUp'))
        assert store.get_layer(a).z_index == 2
        assert store.get_layer(b).z_index == 1

    def test_arrow_down_steps_down(self, controller, store, layers_with_z):
        a, b, c = layers_with_z(1, 2, 3)
        store.set_focus(c)
        controller.handle_key(key_down('ArrowDown'))
        assert store.get_layer(c).z_index == 2

    def test_alt_arrow_up_brings_to_front(self, controller, store, layers_with_z):
        a, b, c = layers_with_z(1, 2, 3)
        store.set_focus(a)
        controller.handle_key(key_down('ArrowUp', 'alt'))
        assert store.layers_in_paint_order()[-1].id == a

    def test_alt_arrow_down_sends_to_back(self, controller, store, layers_with_z):
        a, b, c = layers_with_z(1, 2, 3)
        store.set_focus(c)
        controller.handle_key(key_down('ArrowDown', 'alt'))
        assert store.layers_in_paint_order()[0].id == c

    def test_page_keys_front_and_back(self, controller, store, layers_with_z):
        a, b, c = layers_with_z(1, 2, 3)
        store.set_focus(b)
        controller.handle_key(key_down('PageUp'))
        assert store.layers_in_paint_order()[-1].id == b
        controller.handle_key(key_down('PageDown'))
        assert store.layers_in_paint_order()[0].id == b

    def test_z_order_keys_do_not_move(self, controller, store, layer_id):
        controller.handle_key(key_down('ArrowUp'))
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y) == (0, 0)
        assert store.is_keyboard_moving is False

    def test_unmapped_key_is_not_consumed(self, controller, store, layer_id):
        assert controller.handle_key(key_down('q')) is False


class TestCancelGesture:

    def test_cancel_clears_drag_and_keyboard_state(self, controller, store, layer_id):
        controller.handle_pointer(press(0, 0, layer_id))
        controller.handle_pointer(move(30, 0))
        controller.handle_key(key_down('w'))
        controller.cancel_gesture()
        assert store.dragging_layer_id is None
        assert store.is_keyboard_moving is False
        assert controller.drag_context is None
        assert controller.held_movement_keys == set()
