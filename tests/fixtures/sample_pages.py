"""
Sample page fixtures for testing.
"""

# Well optimized page - should pass every scored check
OPTIMIZED_PAGE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Optimized Page - Complete with All Elements</title>
    <meta name="description" content="This is a well optimized meta description that is exactly the right length for search engine results pages.">
    <link rel="canonical" href="https://example.com/">
    <meta name="robots" content="index, follow">

    <!-- Open Graph -->
    <meta property="og:title" content="Optimized Page">
    <meta property="og:description" content="Optimized for social sharing">
    <meta property="og:image" content="https://example.com/og-image.jpg">

    <!-- Twitter Card -->
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="Optimized Page">
    <meta name="twitter:image" content="https://example.com/twitter-image.jpg">
</head>
<body>
    <nav>
        <a href="/">Home</a>
        <a href="/about">About Us</a>
        <a href="https://partner.example.org/">Partner</a>
    </nav>
    <main>
        <h1>Optimized Page Title</h1>
        <h2>First Section</h2>
        <p>Content for the first section.</p>
        <h3>Subsection</h3>
        <h2>Second Section</h2>
        <img src="/images/hero.jpg" alt="Hero image">
        <img src="/images/team.png" alt="Our team">
    </main>
</body>
</html>
"""

# Page with most SEO elements missing
POOR_PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta name="robots" content="noindex, nofollow">
</head>
<body>
    <h3>Deep heading without parents</h3>
    <h1></h1>
    <h1>Second title</h1>
    <img src="/images/no-alt.jpg">
    <img src="data:image/png;base64,iVBORw0KGgo=" alt="  ">
    <a href="#top">Back to top</a>
    <a href="javascript:void(0)">Click</a>
</body>
</html>
"""

ROBOTS_TXT = """User-agent: *
Disallow: /admin/

Sitemap: https://example.com/sitemap.xml
Sitemap: https://example.com/sitemap-news.xml
"""

SITEMAP_URLSET_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
    <url><loc>https://example.com/</loc></url>
    <url><loc>https://example.com/about</loc></url>
    <url><loc>https://example.com/contact</loc></url>
</urlset>
"""

SITEMAP_SINGLE_URL_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
    <url><loc>https://example.com/</loc></url>
</urlset>
"""

SITEMAP_INDEX_XML = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
    <sitemap><loc>https://example.com/sitemap-pages.xml</loc></sitemap>
    <sitemap><loc>https://example.com/sitemap-posts.xml</loc></sitemap>
</sitemapindex>
"""
