"""Helper functions shared by the test suite"""
