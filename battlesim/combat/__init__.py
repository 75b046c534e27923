"""
Combat system module for the battle simulator.

This module handles the battle itself: turn order, damage mitigation, action
resolution, AI policies and the battle controller state machine.
"""
