"""Core Module

Contains the shared infrastructure every tool depends on:
- logging_config: centralized logging setup
- config_manager: YAML/env configuration
- exceptions: project error hierarchy
"""
