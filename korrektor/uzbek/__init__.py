"""Functionality with Uzbek-specific implementations"""
