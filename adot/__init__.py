"""
adot
----
命令行小工具：发布微博客、更新当前位置、为 README 追加页脚。
"""

__version__ = "1.0.0"
