# histfsm/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Mapping

StateID = str
EventID = str

TransitionTable = Mapping[EventID, StateID]
