from .core import clamp


class Paddle:
    def __init__(self, x, y, width, height, speed):
        self.x = x
        self.y = float(y)
        self.width = width
        self.height = height
        # Max movement per tick
        self.speed = speed

    def max_y(self, field_height):
        return field_height - self.height

    # Keyboard / AI movement
    def move_by(self, dy: float, field_height: int):
        self.y = clamp(self.y + dy, 0, self.max_y(field_height))

    # Pointer control: center the paddle on the pointer
    def move_to_center_on(self, pointer_y: float, field_height: int):
        self.y = clamp(pointer_y - self.height / 2.0, 0, self.max_y(field_height))

    def center_y(self):
        return self.y + self.height / 2.0
