"""pagelinker - sibling page links for statically rendered content trees."""
