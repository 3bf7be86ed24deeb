# main.py
"""
Main entry point for the particle force simulation.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Builds the scene: State Buffer, forces, predator and goal.
4. Runs the main loop: forces, integration, drawing.
5. Handles clean shutdown.
"""
import argparse
import logging
from utils import setup_logging, load_config
import numpy as np
import cProfile
import pstats
import io


def main():
    """
    The main function to run the simulation.
    """
    parser = argparse.ArgumentParser(description="Particle force simulation.")
    parser.add_argument('--config', default='config.json', help="Path to the JSON config file.")
    parser.add_argument('--headless', action='store_true', help="Run without opening a window.")
    args = parser.parse_args()

    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"FATAL: Could not load {args.config}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Force Simulation Starting ---")

    sim_params = config['simulation_parameters']
    run_params = config['run_control']
    vis_params = config['visualization']

    from scene import build_scene
    from simulation import Simulation

    # --- Component Initialization ---
    scene = build_scene(config['scene'], seed=sim_params.get('seed', 0))
    sim = Simulation(
        scene.state, scene.engine, sim_params,
        predator_index=scene.predator_index,
        goal_force=scene.goal_force
    )

    visualizer = None
    if not args.headless:
        from visualization import Visualizer
        visualizer = Visualizer(scene.engine, vis_params)

    profiler = cProfile.Profile()

    log_throttle = run_params.get('log_throttle_steps', 100)
    max_steps = run_params.get('max_steps', 5000)

    running = True
    step_num = 0

    profiler.enable()
    while running:
        sim.step()
        step_num += 1

        if visualizer is not None:
            goal = scene.goal_force.anchor if scene.goal_force is not None else None
            if not visualizer.draw(scene.state, scene.predator_index, goal):
                running = False

        # Hot loops must throttle logs
        if step_num % log_throttle == 0:
            logging.info(f"Simulation step {step_num}/{max_steps}")
            avg_speed = np.mean(np.linalg.norm(scene.state.velocities(), axis=1))
            logging.debug(f"Step {step_num} | Average Speed: {avg_speed:.4f}")

        if step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping simulation.")
            running = False
    profiler.disable()

    if visualizer is not None:
        visualizer.close()
    logging.info("Simulation loop finished.")

    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Force Simulation Shutting Down ---")


if __name__ == "__main__":
    main()
