"""Engine-wide configuration values."""

WINDOW_WIDTH: float = 1000.0
WINDOW_HEIGHT: float = 1000.0
WINDOW_TITLE: str = "planar2d"

CAMERA_SPEED: float = 300.0
MOVE_ZONE: float = 150.0

DEFAULT_ZOOM: float = 1.0
MAX_ZOOM: float = 2.0
MIN_ZOOM: float = 0.5
ZOOM_SPEED: float = 0.2

KEY_BINDINGS_FILE: str = "KeyBindings.json"
VERTEX_SHADER_PATH: str = "Shaders/shader.vert"
FRAGMENT_SHADER_PATH: str = "Shaders/shader.frag"