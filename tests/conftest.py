import pytest


CUPCAKE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>Cupcake Recipe</title>
</head>
<body>
<h1>Cupcakes</h1>
<img src="https://x/0117.jpg" alt="Cupcakes">
<ul>
<li>1 large egg</li>
<li>2 tablespoons milk</li>
<li>1 teaspoon salt</li>
</ul>
<script type="application/ld+json">
{
    "@context": "http://schema.org",
    "@type": "Recipe",
    "name": "Cupcakes",
    "image": [{"@type": "ImageObject", "url": "https://x/0117.jpg"}],
    "recipeYield": "4 servings",
    "author": {"@type": "Person", "name": "John Apple"},
    "description": "Fluffy cupcakes",
    "prepTime": "PT900S",
    "cookTime": "PT1980S",
    "totalTime": "PT2880S",
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "something", "name": "something", "url": "https://recipes.com/#step-1"},
        {"@type": "HowToStep", "text": "something2", "name": "something3", "url": "https://recipes.com/#step-2"},
        {"@type": "HowToStep", "text": "something4", "name": "something5", "url": "https://recipes.com/#step-3"}
    ],
    "recipeIngredient": ["1 large egg", "2 tablespoons milk", "1 teaspoon salt"]
}
</script>
</body>
</html>
"""


def page(*scripts, script_type="application/ld+json"):
    """Build a minimal page with one script tag per JSON text."""
    tags = "\n".join(f'<script type="{script_type}">{s}</script>' for s in scripts)
    return f"<html><head>{tags}</head><body><p>hello</p></body></html>"


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def cupcake_html():
    return CUPCAKE_HTML.encode("utf-8")
