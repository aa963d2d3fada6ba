"""
語言模組
"""
