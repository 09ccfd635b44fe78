"""
Tracking App - Public Order Tracking

Lets a workshop customer follow a repair order and answer its quote through
an opaque tracking token, without a staff account.

Key Features:
- Order snapshot lookup by token
- Quote approval and rejection
- Customer questions on a pending quote

Architecture:
- Services: order_tracking (domain operations), store (hosted store RPC client)
- Views: single APIView with explicit routes per action
- Exceptions: domain exception hierarchy, JSON exception handler
"""
