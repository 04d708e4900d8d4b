"""Metric models, schema and registry"""
