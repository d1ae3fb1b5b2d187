"""
The MODEL layer contains pure data structures and geometry logic.
It has NO knowledge of the command line; text parsing and reports live in
`convexquad.model.io` and are never imported by the geometry modules.
"""
