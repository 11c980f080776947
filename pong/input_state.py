import pygame

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
TOGGLE_KEYS = (pygame.K_SPACE,)


class InputState:
    """Latest input seen since the previous tick.

    Event handlers only write here; the engine reads it once per tick.
    """

    def __init__(self):
        self.pointer_y = None
        self.held = set()
        self.toggle_requested = False

    def pointer_moved(self, y: float):
        self.pointer_y = float(y)

    def key_down(self, key):
        # Only a fresh press toggles; a held key (or key repeat) doesn't
        if key in TOGGLE_KEYS and key not in self.held:
            self.toggle_requested = True
        self.held.add(key)

    def key_up(self, key):
        self.held.discard(key)

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.pointer_moved(event.pos[1])
        elif event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)

    def vertical_intent(self) -> int:
        # -1 up, +1 down, 0 when neither or both
        direction = 0
        if any(k in self.held for k in UP_KEYS):
            direction -= 1
        if any(k in self.held for k in DOWN_KEYS):
            direction += 1
        return direction

    def take_pointer(self):
        y = self.pointer_y
        self.pointer_y = None
        return y

    def take_toggle(self) -> bool:
        requested = self.toggle_requested
        self.toggle_requested = False
        return requested
