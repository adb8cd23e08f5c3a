#!/usr/bin/env python3
"""
Metric Recipes - Main Entry Point
"""
from metric_recipes.main import app

if __name__ == "__main__":
    app()
