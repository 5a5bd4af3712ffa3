"""
Use cases of the task service.

Routers call TaskService instead of touching a repository directly; the
service validates input and raises TaskError subclasses that the app turns
into envelope responses.
"""
