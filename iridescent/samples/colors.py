import numpy as np
# RED
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)

# YELLOW
YELLOW_INT_RGB = np.array([255, 255, 0], dtype=np.uint8)

# GREEN
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)

# CYAN
CYAN_INT_RGB = np.array([0, 255, 255], dtype=np.uint8)

# BLUE
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)

#MAGENTA
MAGENTA_INT_RGB = np.array([255, 0, 255], dtype=np.uint8)

# Hue cycle used by Color.rainbow: closes back on red.
RAINBOW_INT_RGB = np.stack([
    RED_INT_RGB,
    YELLOW_INT_RGB,
    GREEN_INT_RGB,
    CYAN_INT_RGB,
    BLUE_INT_RGB,
    MAGENTA_INT_RGB,
    RED_INT_RGB,
])

__all__ = [
    "RED_INT_RGB",
    "YELLOW_INT_RGB",
    "GREEN_INT_RGB",
    "CYAN_INT_RGB",
    "BLUE_INT_RGB",
    "MAGENTA_INT_RGB",
    "RAINBOW_INT_RGB",
]
