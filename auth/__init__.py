"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, configurable work factor)
  • Signup / login service and API routes
  • Error taxonomy mapped to HTTP status codes
"""
