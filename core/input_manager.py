import pygame

# Action -> keys that trigger it; any bound key counts
DEFAULT_BINDINGS = {
    "move_up": (pygame.K_w, pygame.K_UP),
    "move_down": (pygame.K_s, pygame.K_DOWN),
    "move_left": (pygame.K_a, pygame.K_LEFT),
    "move_right": (pygame.K_d, pygame.K_RIGHT),
    "confirm": (pygame.K_SPACE, pygame.K_RETURN),
    "title": (pygame.K_F1,),
    "quit": (pygame.K_ESCAPE,),
}


class InputManager:
    def __init__(self, bindings=None):
        self.bindings = dict(bindings or DEFAULT_BINDINGS)
        self.keys = {}
        self.prev_keys = {}

    def bind(self, action, *keys):
        self.bindings[action] = keys

    # =====================================================
    # UPDATE (call once per frame BEFORE player.update)
    # =====================================================

    def update(self, keys=None):
        """Snapshot key state; keys defaults to pygame.key.get_pressed()."""
        self.prev_keys = self.keys
        self.keys = keys if keys is not None else pygame.key.get_pressed()

    def _any(self, state, action):
        return any(_held(state, key) for key in self.bindings.get(action, ()))

    # =====================================================
    # QUERIES
    # =====================================================

    def is_down(self, action):
        return self._any(self.keys, action)

    def is_pressed(self, action):
        return self._any(self.keys, action) and not self._any(self.prev_keys, action)

    def is_released(self, action):
        return not self._any(self.keys, action) and self._any(self.prev_keys, action)


def _held(state, key):
    # get_pressed() is indexable by key constant; test doubles may be dicts
    if isinstance(state, dict):
        return bool(state.get(key))
    return bool(state[key])
