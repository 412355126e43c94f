"""
Core fixed-point decimal: representation, arithmetic, codecs and contracts.

Не зависит от внешних систем; все операции чистые и детерминированные.
"""
