"""JavaScript evaluated inside the page by the built-in actions.

Each script is a single-argument function so it can be handed straight to
Playwright's ``page.evaluate`` / ``page.wait_for_function``.
"""

# Set the checked state of the first element matching ``selector``.
# Rejects when nothing matches.
CHECK_FIELD_SCRIPT = """
({ selector, checked }) => {
    const target = document.querySelector(selector);
    if (!target) {
        return Promise.reject(new Error('No element found'));
    }
    target.checked = checked;
    return Promise.resolve();
}
"""

# Truthy once window.location[property] equals ``expected``
# (or stops equalling it, when ``negated``).
WAIT_FOR_LOCATION_SCRIPT = """
({ property, expected, negated }) => {
    return (window.location[property] === expected) !== negated;
}
"""
