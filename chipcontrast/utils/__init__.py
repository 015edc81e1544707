"""Pure color helpers: parsing and WCAG contrast math."""
