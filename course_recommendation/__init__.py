"""
Course recommendation block

Recommends courses to a logged-in user from co-enrollment patterns and renders
them for the desktop dashboard and the mobile app.
"""
