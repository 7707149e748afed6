# ev_platform/client/carousel.py
"""Image carousel for a vehicle's ordered image list. Wraps around at both ends."""

PLACEHOLDER_IMAGE = "/placeholder.jpg"


class ImageCarousel:
    def __init__(self, images):
        self.images = [img for img in images or [] if img]
        self.index = 0

    @property
    def primary(self) -> str:
        return self.images[0] if self.images else PLACEHOLDER_IMAGE

    @property
    def current(self) -> str:
        return self.images[self.index] if self.images else PLACEHOLDER_IMAGE

    def next(self) -> str:
        if self.images:
            self.index = (self.index + 1) % len(self.images)
        return self.current

    def previous(self) -> str:
        if self.images:
            self.index = (self.index - 1) % len(self.images)
        return self.current

    def select(self, index: int) -> str:
        if not 0 <= index < len(self.images):
            raise IndexError(f"Image {index} out of range (0..{len(self.images) - 1})")
        self.index = index
        return self.current

    def __len__(self):
        return len(self.images)
