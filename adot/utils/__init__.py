"""
adot Utilities
--------------
配置、日志，以及 Firestore / ipinfo.io 的访问工具。
"""
