# viewer/window.py
import numpy as np
import pygame
from renderer.ppm import to_rgb8

def make_surface(image: np.ndarray) -> pygame.Surface:
    """
    Convert a (height, width, 3) float image into a pygame surface.
    pygame indexes surfaces as [x, y], so the array is transposed.
    """
    rgb = to_rgb8(image)
    return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.transpose(1, 0, 2)))

def show_image(image: np.ndarray, scale: int = 2, caption: str = "Ray Tracer") -> None:
    """Open a window showing the image until it is closed or Escape is pressed."""
    height, width = image.shape[:2]
    window_width, window_height = width * scale, height * scale

    pygame.init()
    try:
        screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(caption)

        # Scale the render up to fill the window
        surf = pygame.transform.scale(make_surface(image), (window_width, window_height))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
    finally:
        pygame.quit()
