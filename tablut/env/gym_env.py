from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tablut.core import ACTION_VECTOR_SIZE, BOARD_SIZE, Board, Side, decode_move, encode_move
from tablut.features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor


class TablutEnv(gym.Env):
    """Both sides play through ``step``; rewards are from the defenders' view."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        move_limit: Optional[int] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._move_limit = move_limit
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self.board = self._new_board(move_limit)

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        move_limit = options.get("move_limit", self._move_limit) if options else self._move_limit
        self.board = self._new_board(move_limit)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self.board.apply_move(decode_move(int(action_index)))

        outcome = self.board.outcome()
        terminated = outcome is not None
        truncated = not terminated and self.board.limit_reached()
        return self._build_observation(), self._compute_reward(outcome), terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.board.winner is not None:
            return mask
        for move in self.board.legal_moves():
            mask[encode_move(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self.board.render(coordinates=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _new_board(move_limit: Optional[int]) -> Board:
        board = Board()
        if move_limit is not None:
            board.set_move_limit(move_limit)
        return board

    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self.board), "aux": build_aux_vector(self.board)}

    def _build_info(self) -> Dict[str, object]:
        return {"legal_action_mask": self.legal_action_mask(), "turn": self.board.turn.value}

    @staticmethod
    def _compute_reward(outcome: Optional[Side]) -> float:
        if outcome is Side.DEFENDERS:
            return 1.0
        if outcome is Side.ATTACKERS:
            return -1.0
        return 0.0
