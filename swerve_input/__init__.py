"""Joystick / gamepad input normalization for swerve drive."""
