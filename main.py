# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from engine import DotLoadingEngine
from frame_clock import FrameClock

# Get the application's dedicated logger
logger = logging.getLogger("dot_loading")

import cProfile, pstats, io

def open_display(display_config):
    """
    Opens (or re-opens) the window described by the 'display' config section.
    Fullscreen uses the desktop size; otherwise the configured size, resizable
    unless the config says otherwise.
    """
    if display_config.get('fullscreen', False):
        info = pygame.display.Info()
        return pygame.display.set_mode((info.current_w, info.current_h), pygame.FULLSCREEN)

    flags = pygame.RESIZABLE if display_config.get('resizable', True) else 0
    size = (display_config.get('width', constants.WIDTH), display_config.get('height', constants.HEIGHT))
    return pygame.display.set_mode(size, flags)

def handle_events(engine):
    """
    Processes pending window events.
    Returns False once the user asked to quit.
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        elif event.type == pygame.VIDEORESIZE:
            # The display surface is re-created at the new size; the engine
            # picks the new dimensions up on its next callback.
            logger.info(f"Window resized to {event.w}x{event.h}.")
            engine.bind_surface(pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key == pygame.K_SPACE:
                # Start/stop toggle
                if engine.running:
                    engine.stop_everything()
                else:
                    engine.start_everything()
    return True

def run_animation_loop(engine, frame_clock, clock, run_config):
    """
    The main loop: one frame-clock frame per display refresh.
    """
    max_frames = run_config.get('max_frames', 0)
    log_throttle = run_config.get('log_throttle_frames', 300)

    running = True
    frame = 0
    while running:
        running = handle_events(engine)
        if not running:
            break

        frame_clock.run_frame()
        pygame.display.flip()
        clock.tick(constants.FPS)
        frame += 1

        # --- Logging (throttled) ---
        if log_throttle and frame % log_throttle == 0:
            logger.debug(
                f"Frame={frame}, "
                f"Particles={len(engine.store)}, "
                f"RollingOffset={engine.renderer.rolling_offset}, "
                f"Surface={engine.surface_size}, "
                f"FPS={clock.get_fps():.1f}"
            )

        if max_frames and frame >= max_frames:
            logger.info(f"Reached max_frames ({max_frames}). Stopping animation.")
            running = False

    return frame

def main():
    """
    Main function to initialize and run the dot animation.
    """
    # --- Setup ---
    # Logging is not set up yet, so a broken config is reported with print.
    try:
        with open('config.json', 'r') as f:
            config = json.load(f)
        master_seed = config['master_seed']
        logger_setup.setup_logging()
    except (OSError, KeyError, TypeError, ValueError) as e:
        print(f"FATAL: Could not load config.json. Error: {e!r}")
        return

    display_config = config.get('display', {})
    run_config = config.get('run_control', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(master_seed)
    logger.info(f"Master RNG initialized with seed: {master_seed}")

    # --- Initialization ---
    pygame.init()
    screen = open_display(display_config)
    pygame.display.set_caption(f"{constants.TITLE} [{display_config.get('canvas', 'window')}]")
    clock = pygame.time.Clock()
    frame_clock = FrameClock()

    engine = DotLoadingEngine(screen, frame_clock, rng)
    engine.start_everything()

    if run_config.get('profile', False):
        profiler = cProfile.Profile()
        profiler.enable()
        frames = run_animation_loop(engine, frame_clock, clock, run_config)
        profiler.disable()

        logger.info("Profiling complete.")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20) # Print the top 20 time-consuming functions
        logger.info(f"\n{s.getvalue()}")
    else:
        frames = run_animation_loop(engine, frame_clock, clock, run_config)

    engine.stop_everything()
    logger.info(f"Application shutting down after {frames} frame(s).")
    pygame.quit()

if __name__ == "__main__":
    main()
