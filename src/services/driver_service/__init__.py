"""
HTTP-интерфейс водителей.
"""
