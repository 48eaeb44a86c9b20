"""Built-in sample detections for demos and smoke tests."""

from __future__ import annotations

from .models import Detection, ElementKind, NormalizedRect

# Hand-drawn login form on a 375x667 sheet: (kind, label, left, top, width, height)
_LOGIN_SKETCH_SIZE = (375, 667)
_LOGIN_SKETCH = [
    (ElementKind.IMAGE, "Logo", 137, 50, 100, 100),
    (ElementKind.TEXT, "Welcome Back", 87, 180, 200, 40),
    (ElementKind.TEXT_FIELD, "Email", 40, 260, 295, 50),
    (ElementKind.TEXT_FIELD, "Password", 40, 330, 295, 50),
    (ElementKind.BUTTON, "Sign In", 40, 420, 295, 55),
    (ElementKind.TEXT, "Forgot Password?", 100, 495, 175, 30),
    (ElementKind.BUTTON, "Create Account", 40, 550, 295, 55),
]


def login_form_sample() -> list[Detection]:
    """Detections for the login form sketch used by the demo command."""
    width, height = _LOGIN_SKETCH_SIZE
    return [
        Detection(
            kind=kind,
            bounding_box=NormalizedRect.from_pixel_box(left, top, left + w, top + h, width, height),
            confidence=0.9,
            label=label,
        )
        for kind, label, left, top, w, h in _LOGIN_SKETCH
    ]
