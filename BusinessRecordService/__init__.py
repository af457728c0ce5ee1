"""
Business Record Service Django project.
"""
