"""Exposition bridges"""
