# renderer/preview.py
import numpy as np
import pygame

def preview(pixels: np.ndarray, title: str = "Path Tracer", max_size: int = 1280) -> None:
    """
    Shows a finished raster in a window until it is closed or Escape is
    pressed. Small images are scaled up to stay visible.
    """
    height, width = pixels.shape[:2]
    scale = max(1, max_size // max(width, height))

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)

        # pygame surfaces are indexed (x, y)
        surface = pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))
        if scale > 1:
            surface = pygame.transform.scale(surface, (width * scale, height * scale))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
