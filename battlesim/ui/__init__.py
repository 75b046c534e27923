"""
User interface module for the battle simulator.

This module provides the terminal front-end: battlefield tables, action and
target menus, and the prompts that feed player choices to the controller.
"""
