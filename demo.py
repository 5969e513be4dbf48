#!/usr/bin/env python3
"""Watch a random player click through Minesweeper."""
import time
import os

import numpy as np

from src.minesweeper import MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 3, level: str = "beginner", seed=None):
    """Run demo games with visualization."""
    env = MinesweeperEnv(level=level, render_mode="ansi")
    env.action_space.seed(seed)

    config = env.config
    print(f"Board: {config.rows}x{config.columns} with {config.num_mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            mask = env.get_action_mask().astype(np.int8)
            action = env.action_space.sample(mask=mask)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins} | Flags left: {info['remaining_flags']}")
            print(f"Last reward: {reward:+.1f}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--level", default="beginner", help="Difficulty level")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, level=args.level, seed=args.seed)
