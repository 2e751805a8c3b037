"""
Combat module for the combat odds engine.

This module holds the estimators: single-hit KO chance, health bar HP
inversion, the two-phase special attack KO chance and hitsplat counting.
"""
