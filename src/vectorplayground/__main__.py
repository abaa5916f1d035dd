"""Run with: python -m vectorplayground"""
from vectorplayground.main import main

main()
