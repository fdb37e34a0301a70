"""
The 101 Fixes catalog.

Static reference data, loaded once at import and never mutated. Ids are the
join key for visitor progress and must stay stable.
"""
from collections import Counter
from typing import Dict, Tuple

from ..models.catalog import Channel, Difficulty, Fix


EXPECTED_TOTAL = 101

EXPECTED_DIFFICULTY_COUNTS = {
    Difficulty.EASY: 34,
    Difficulty.MEDIUM: 33,
    Difficulty.HARD: 34,
}


FIXES: Tuple[Fix, ...] = (
    # Easy (1-34)
    Fix(
        id=1,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Hero headline lacks a clear promise",
        solution="Rewrite the H1 to state a single, specific benefit and outcome. Keep it under ~12 words and pair it with 1 action-focused CTA.",
        example="Change 'Quality skincare' to 'Clearer skin in 14 days. Start your plan.'",
    ),
    Fix(
        id=2,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No primary CTA above the fold",
        solution="Place one high-contrast button near the H1 and make it sticky on mobile. Remove competing CTAs in the hero.",
        example="Add 'Shop Best Sellers' button next to the headline and hide secondary links on mobile.",
    ),
    Fix(
        id=3,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Crowded hero with sliders and multiple messages",
        solution="Remove carousels and keep a single static hero. Use one image that shows the product outcome.",
        example="Replace a 3-slide carousel with one lifestyle shot that matches the ad promise.",
    ),
    Fix(
        id=4,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Complex navigation confuses visitors",
        solution="Simplify your main menu to 5-7 categories maximum. Use clear, descriptive labels and organize products logically by customer intent.",
        example="Change 'Apparel & Accessories' to 'Men's Clothing' and 'Women's Clothing'",
    ),
    Fix(
        id=5,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Missing or weak call-to-action buttons",
        solution="Use action-oriented text like 'Get Yours Now' or 'Start Saving Today' instead of generic 'Submit'. Make buttons stand out with contrasting colors.",
        example="Change 'Learn More' to 'Get 50% Off Today' with bright orange button",
    ),
    Fix(
        id=6,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No clear value proposition on homepage",
        solution="Add a compelling headline that clearly states what you sell and the main benefit. Place it above the fold where visitors see it immediately.",
        example="'Get Professional Photos in 24 Hours - No Studio Required'",
    ),
    Fix(
        id=7,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Missing contact information reduces trust",
        solution="Display phone number, email, and physical address in header or footer. Add 'Contact Us' page with multiple ways to reach you.",
        example="Add '📞 1-800-HELP-NOW' in top navigation bar",
    ),
    Fix(
        id=8,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Poor mobile experience",
        solution="Ensure all buttons are thumb-friendly (44px minimum), text is readable without zooming, and forms work smoothly on mobile devices.",
        example="Increase 'Buy Now' button size from 32px to 48px height on mobile",
    ),
    Fix(
        id=9,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No urgency or scarcity messaging",
        solution="Add time-limited offers, stock counters, or deadline messaging to create urgency without being pushy.",
        example="'Only 3 left in stock' or '48-hour flash sale ends soon'",
    ),
    Fix(
        id=10,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Unclear return policy",
        solution="Prominently display your return policy and guarantee. Make it easy to find and understand to reduce purchase anxiety.",
        example="'30-day money-back guarantee - no questions asked'",
    ),
    Fix(
        id=11,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="Ad copy doesn't match landing page",
        solution="Ensure your ad headline and key messaging appear on the landing page. Maintain consistent tone, offers, and visual elements.",
        example="If ad says '50% off winter coats', landing page headline should mention the same offer",
    ),
    Fix(
        id=12,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="Generic ad headlines don't stand out",
        solution="Use specific numbers, benefits, and emotional triggers. Test different angles like savings, convenience, or status.",
        example="Change 'Great Shoes' to 'Comfortable Shoes That Don't Hurt After 12 Hours'",
    ),
    Fix(
        id=13,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="No clear call-to-action in ads",
        solution="Include specific action words and create urgency. Tell people exactly what to do next.",
        example="'Shop Now - Free Shipping Ends Tonight' instead of 'Learn More'",
    ),
    Fix(
        id=14,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="Not using ad extensions",
        solution="Add sitelink extensions, callout extensions, and structured snippets to take up more space and provide more information.",
        example="Add sitelinks for 'Free Shipping', 'Size Guide', 'Reviews' below main ad",
    ),
    Fix(
        id=15,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="Poor quality images in visual ads",
        solution="Use high-resolution, well-lit product photos with clean backgrounds. Show products in use when possible.",
        example="Replace white background product shot with lifestyle image of person wearing the item",
    ),
    Fix(
        id=16,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="Generic subject lines get ignored",
        solution="Personalize subject lines with names, locations, or past purchases. Create curiosity and urgency.",
        example="'Sarah, your cart is about to expire' instead of 'Complete your purchase'",
    ),
    Fix(
        id=17,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="No welcome email series",
        solution="Set up automated welcome emails introducing your brand, sharing your story, and providing value immediately after signup.",
        example="Send 3-email series: Welcome + discount, Brand story, Best sellers",
    ),
    Fix(
        id=18,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="Emails not mobile-optimized",
        solution="Use single-column layouts, large buttons (44px+), and readable font sizes (16px+) for mobile devices.",
        example="Stack product images vertically instead of side-by-side on mobile",
    ),
    Fix(
        id=19,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="No clear unsubscribe option",
        solution="Make unsubscribe link easy to find in footer. Consider offering frequency options instead of complete removal.",
        example="Add 'Update preferences' link next to unsubscribe option",
    ),
    Fix(
        id=20,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="Boring email design",
        solution="Use your brand colors, include product images, and create visual hierarchy with headers and spacing.",
        example="Add colorful header with logo and use product photos instead of text-only descriptions",
    ),
    Fix(
        id=21,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="No social media presence",
        solution="Create business profiles on platforms where your customers spend time. Post regularly and engage with followers.",
        example="Set up Instagram business account and post 3 times per week",
    ),
    Fix(
        id=22,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="Not collecting email addresses",
        solution="Add email signup forms with incentives like discounts or free guides. Place them strategically throughout your site.",
        example="Offer '10% off first order' popup after 30 seconds on site",
    ),
    Fix(
        id=23,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="No customer testimonials",
        solution="Reach out to happy customers for reviews and testimonials. Offer small incentives for detailed feedback.",
        example="Email recent buyers: 'Share a photo for 15% off your next order'",
    ),
    Fix(
        id=24,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="Missing Google My Business listing",
        solution="Claim and optimize your Google My Business profile with photos, hours, and customer reviews.",
        example="Add 10 high-quality photos of your products and storefront",
    ),
    Fix(
        id=25,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="No referral program",
        solution="Create simple referral system where customers get rewards for bringing friends. Make sharing easy.",
        example="'Give $10, Get $10' - friends get discount, referrer gets store credit",
    ),
    Fix(
        id=26,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Checkout process too long",
        solution="Reduce checkout to 2-3 steps maximum. Remove unnecessary form fields and offer guest checkout option.",
        example="Combine shipping and payment into one page instead of separate steps",
    ),
    Fix(
        id=27,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No product videos",
        solution="Add short videos showing products in use. Even simple phone videos can increase conversions significantly.",
        example="30-second video showing how easy it is to assemble your furniture",
    ),
    Fix(
        id=28,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Weak product descriptions",
        solution="Focus on benefits over features. Explain how the product solves problems or improves the customer's life.",
        example="Instead of '100% cotton', write 'Stays soft and comfortable all day long'",
    ),
    Fix(
        id=29,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No size guides or specifications",
        solution="Provide detailed size charts, dimensions, and specifications to reduce returns and increase confidence.",
        example="Add interactive size guide with 'Find My Size' tool",
    ),
    Fix(
        id=30,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="Hidden shipping costs",
        solution="Display shipping costs upfront or offer free shipping threshold. Surprise costs cause cart abandonment.",
        example="'Free shipping on orders over $50' prominently displayed",
    ),
    Fix(
        id=31,
        difficulty=Difficulty.EASY,
        channel=Channel.PAID_ADS,
        problem="Not tracking conversions properly",
        solution="Set up conversion tracking for purchases, email signups, and other key actions. Use this data to optimize campaigns.",
        example="Install Facebook Pixel and Google Analytics conversion tracking",
    ),
    Fix(
        id=32,
        difficulty=Difficulty.EASY,
        channel=Channel.EMAIL,
        problem="No abandoned cart emails",
        solution="Set up automated emails to recover abandoned carts. Send 2-3 emails over a week with different approaches.",
        example="Email 1: Reminder, Email 2: Social proof, Email 3: Discount offer",
    ),
    Fix(
        id=33,
        difficulty=Difficulty.EASY,
        channel=Channel.MARKETING,
        problem="Not asking for reviews",
        solution="Follow up with customers after purchase to request reviews. Make the process simple with direct links.",
        example="Send email 7 days after delivery: 'How did we do? Leave a review'",
    ),
    Fix(
        id=34,
        difficulty=Difficulty.EASY,
        channel=Channel.LANDING_PAGE,
        problem="No FAQ section",
        solution="Create comprehensive FAQ addressing common concerns about shipping, returns, sizing, and product details.",
        example="Add expandable FAQ section covering top 10 customer questions",
    ),

    # Medium (35-67)
    Fix(
        id=35,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No exit-intent popups to capture leaving visitors",
        solution="Implement exit-intent technology to show targeted offers when users are about to leave. Test different offers like discounts, free shipping, or lead magnets.",
        example="Show '10% off + free shipping' popup when mouse moves toward browser close button",
    ),
    Fix(
        id=36,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="Product descriptions don't address customer concerns",
        solution="A/B test benefit-focused vs feature-focused copy. Interview customers to understand their main concerns and address them directly in descriptions.",
        example="Test 'Wrinkle-free fabric saves you ironing time' vs 'Made with 65% polyester blend'",
    ),
    Fix(
        id=37,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No live chat support during shopping",
        solution="Add live chat widget with proactive messages based on user behavior. Train team to handle common questions quickly.",
        example="Trigger chat after 2 minutes on product page: 'Need help choosing the right size?'",
    ),
    Fix(
        id=38,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No urgency or scarcity indicators",
        solution="Show real inventory levels, recent purchases, or time-limited offers. Use social proof to create urgency without being pushy.",
        example="'3 people bought this in the last hour' or 'Only 7 left at this price'",
    ),
    Fix(
        id=39,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="Poor search functionality",
        solution="Implement smart search with autocomplete, typo tolerance, and filters. Show popular searches and no-results recommendations.",
        example="Add search suggestions dropdown and 'Did you mean...' for misspellings",
    ),
    Fix(
        id=40,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not using retargeting campaigns",
        solution="Set up retargeting for website visitors, cart abandoners, and past customers. Create different ad sets for each audience with relevant messaging.",
        example="Show 'Complete your purchase' ads to cart abandoners with 10% discount",
    ),
    Fix(
        id=41,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Ad creative gets stale quickly",
        solution="Create ad creative testing schedule. Rotate new images, videos, and copy every 2-3 weeks to prevent ad fatigue.",
        example="Test 5 different product angles: lifestyle, close-up, comparison, in-use, packaging",
    ),
    Fix(
        id=42,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not optimizing for mobile users",
        solution="Create mobile-specific ad creative with vertical formats. Ensure landing pages load fast and are thumb-friendly.",
        example="Use 9:16 video format for Instagram Stories and TikTok ads",
    ),
    Fix(
        id=43,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Poor audience targeting",
        solution="Create detailed buyer personas and use platform targeting options. Test lookalike audiences based on your best customers.",
        example="Target 'parents aged 25-40 interested in organic food' instead of broad 'parents'",
    ),
    Fix(
        id=44,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="No segmentation strategy",
        solution="Segment email list by purchase history, engagement level, and demographics. Send targeted campaigns to each segment.",
        example="Send VIP offers to customers who spent $500+, different content to new subscribers",
    ),
    Fix(
        id=45,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="Low email deliverability",
        solution="Clean email list regularly, use double opt-in, and monitor sender reputation. Avoid spam trigger words and maintain good engagement rates.",
        example="Remove subscribers who haven't opened emails in 6 months",
    ),
    Fix(
        id=46,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="No post-purchase email sequence",
        solution="Create automated sequence for order confirmation, shipping updates, delivery confirmation, and follow-up for reviews.",
        example="5-email sequence: Confirmation, Shipped, Delivered, How-to guide, Review request",
    ),
    Fix(
        id=47,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="Generic email content",
        solution="Personalize emails with customer names, purchase history, and browsing behavior. Create dynamic content based on preferences.",
        example="Show recommended products based on previous purchases in weekly newsletter",
    ),
    Fix(
        id=48,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="No content marketing strategy",
        solution="Create valuable blog content, how-to guides, and videos that help customers. Focus on SEO and sharing on social media.",
        example="Weekly blog posts about 'How to style [your product]' with customer photos",
    ),
    Fix(
        id=49,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="Not leveraging user-generated content",
        solution="Encourage customers to share photos using your products. Create branded hashtags and feature customer content on your site.",
        example="Create #MyBrandStyle hashtag and feature customer photos on homepage",
    ),
    Fix(
        id=50,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="No influencer partnerships",
        solution="Partner with micro-influencers in your niche. Focus on engagement rates over follower count for better ROI.",
        example="Partner with 10 fitness micro-influencers (10K-100K followers) for workout gear",
    ),
    Fix(
        id=51,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No product comparison tools",
        solution="Create comparison charts or tools to help customers choose between similar products. Highlight key differences and benefits.",
        example="Side-by-side comparison table for different mattress firmness levels",
    ),
    Fix(
        id=52,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="Weak homepage design",
        solution="Redesign homepage to clearly communicate value proposition, showcase best products, and guide visitors to key actions.",
        example="Add hero section with main benefit, featured products grid, and customer testimonials",
    ),
    Fix(
        id=53,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No social proof on product pages",
        solution="Add customer photos, video testimonials, and detailed reviews to product pages. Show real people using your products.",
        example="Display customer photos wearing the clothing item in different settings",
    ),
    Fix(
        id=54,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not testing different ad formats",
        solution="Test carousel ads, video ads, collection ads, and single image ads. Different formats work better for different products and audiences.",
        example="Test video ads showing product in use vs static lifestyle images",
    ),
    Fix(
        id=55,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="No win-back campaigns",
        solution="Create automated campaigns to re-engage inactive subscribers and customers. Offer special incentives to return.",
        example="'We miss you' email series with increasing discounts: 10%, 15%, 20% off",
    ),
    Fix(
        id=56,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="No loyalty program",
        solution="Create points-based or tier-based loyalty program to encourage repeat purchases and increase customer lifetime value.",
        example="Earn 1 point per $1 spent, 100 points = $10 off next order",
    ),
    Fix(
        id=57,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="Poor category page organization",
        solution="Organize products logically with clear filters and sorting options. Use high-quality category images and descriptions.",
        example="Add filters for size, color, price range, and customer rating on category pages",
    ),
    Fix(
        id=58,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not using video content",
        solution="Create product demonstration videos, customer testimonials, and behind-the-scenes content for ad campaigns.",
        example="15-second product demo video showing key features and benefits",
    ),
    Fix(
        id=59,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="No birthday or anniversary campaigns",
        solution="Collect customer birthdays and purchase anniversaries to send personalized offers and build emotional connection.",
        example="Send birthday email with 25% off coupon and personalized product recommendations",
    ),
    Fix(
        id=60,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="Not optimizing for local search",
        solution="Optimize for local SEO with location-based keywords, local business listings, and location pages if applicable.",
        example="Create 'Best [product] in [city]' content and optimize Google My Business",
    ),
    Fix(
        id=61,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No product bundling options",
        solution="Create product bundles and packages that increase average order value. Show savings compared to individual purchases.",
        example="'Complete skincare routine' bundle saves $25 vs buying items separately",
    ),
    Fix(
        id=62,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not optimizing ad scheduling",
        solution="Analyze when your customers are most active and adjust ad scheduling accordingly. Increase bids during peak hours.",
        example="Increase ad spend 20% during 7-9 PM when conversion rates are highest",
    ),
    Fix(
        id=63,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.EMAIL,
        problem="No cross-sell campaigns",
        solution="Send targeted emails suggesting complementary products based on purchase history and browsing behavior.",
        example="Bought running shoes? Get email about running socks and fitness tracker",
    ),
    Fix(
        id=64,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="No seasonal campaigns",
        solution="Plan marketing campaigns around holidays, seasons, and industry events. Create themed content and promotions.",
        example="Back-to-school campaign for office supplies with student discounts",
    ),
    Fix(
        id=65,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.LANDING_PAGE,
        problem="No wishlist functionality",
        solution="Add wishlist feature to let customers save products for later. Send reminder emails about saved items.",
        example="Heart icon on products to save to wishlist, email reminders after 3 days",
    ),
    Fix(
        id=66,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.PAID_ADS,
        problem="Not using customer data for targeting",
        solution="Upload customer email lists for lookalike audiences and exclusion targeting. Use purchase data to create custom audiences.",
        example="Create lookalike audience based on customers who spent $200+ in last 90 days",
    ),
    Fix(
        id=67,
        difficulty=Difficulty.MEDIUM,
        channel=Channel.MARKETING,
        problem="No partnership opportunities",
        solution="Partner with complementary businesses for cross-promotion, joint campaigns, or affiliate programs.",
        example="Partner with interior designers to promote home decor products",
    ),

    # Hard (68-101)
    Fix(
        id=68,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No AI-powered product recommendations",
        solution="Implement machine learning algorithms to show personalized product recommendations based on browsing history, purchase patterns, and similar customer behavior.",
        example="Amazon-style 'Customers who bought this also bought' with 35% higher conversion rates",
    ),
    Fix(
        id=69,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="Generic checkout experience for all customers",
        solution="Build custom checkout flows based on customer segments, purchase history, and behavior patterns. Optimize each step for different user types.",
        example="VIP customers get one-click checkout, new customers get guided experience with trust signals",
    ),
    Fix(
        id=70,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced customer segmentation",
        solution="Create behavioral-based customer segments using RFM analysis (Recency, Frequency, Monetary). Develop targeted strategies for each segment.",
        example="Champions (high RFM) get exclusive previews, At-risk customers get win-back campaigns",
    ),
    Fix(
        id=71,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No predictive analytics for customer behavior",
        solution="Implement predictive models to forecast customer lifetime value, churn probability, and next purchase timing.",
        example="Identify customers 80% likely to churn and trigger retention campaigns automatically",
    ),
    Fix(
        id=72,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="Manual bid management inefficiency",
        solution="Implement automated bidding strategies using machine learning. Set up dynamic bid adjustments based on device, location, time, and audience.",
        example="Automated bidding increases ROAS by 23% while reducing manual work by 80%",
    ),
    Fix(
        id=73,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="Static email content for all subscribers",
        solution="Create dynamic email content that changes based on recipient behavior, preferences, and real-time data like weather or inventory.",
        example="Email shows different products based on browsing history and current weather in recipient's location",
    ),
    Fix(
        id=74,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No real-time personalization",
        solution="Implement real-time website personalization showing different content, offers, and products based on visitor behavior and characteristics.",
        example="First-time visitors see social proof, returning visitors see new arrivals, VIPs see exclusive offers",
    ),
    Fix(
        id=75,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No omnichannel customer experience",
        solution="Create seamless experience across all touchpoints - website, email, social media, ads, and customer service. Unify customer data and messaging.",
        example="Customer sees same personalized recommendations on website, email, and retargeting ads",
    ),
    Fix(
        id=76,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No advanced attribution modeling",
        solution="Implement multi-touch attribution to understand the full customer journey and optimize budget allocation across channels.",
        example="Discover that YouTube ads don't convert directly but influence 40% of Facebook conversions",
    ),
    Fix(
        id=77,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No progressive web app features",
        solution="Convert website to Progressive Web App (PWA) for faster loading, offline functionality, and app-like experience on mobile.",
        example="PWA reduces bounce rate by 42% and increases mobile conversions by 36%",
    ),
    Fix(
        id=78,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="No advanced automation workflows",
        solution="Build complex automation workflows with multiple triggers, conditions, and paths based on customer behavior and data.",
        example="15-step workflow: Welcome → Browse behavior → Purchase → Post-purchase → Loyalty → Win-back",
    ),
    Fix(
        id=79,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No voice search optimization",
        solution="Optimize content and SEO for voice search queries. Focus on conversational keywords and featured snippet optimization.",
        example="Optimize for 'What's the best running shoe for beginners' instead of 'best running shoes'",
    ),
    Fix(
        id=80,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced A/B testing program",
        solution="Implement multivariate testing and statistical significance tracking. Test multiple elements simultaneously and measure long-term impact.",
        example="Test 16 combinations of headline, CTA, and image simultaneously with proper statistical analysis",
    ),
    Fix(
        id=81,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No creative automation at scale",
        solution="Build systems to automatically generate and test ad creative variations using templates, dynamic content, and AI tools.",
        example="Generate 100 ad variations automatically by combining product images, headlines, and CTAs",
    ),
    Fix(
        id=82,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No customer lifetime value optimization",
        solution="Build comprehensive CLV models and optimize all marketing activities to maximize long-term customer value rather than short-term conversions.",
        example="Shift budget from acquisition to retention, increasing CLV by 45% while reducing CAC",
    ),
    Fix(
        id=83,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced search and discovery",
        solution="Implement AI-powered search with natural language processing, visual search, and intelligent filters based on user intent.",
        example="Visual search allows customers to upload photos and find similar products instantly",
    ),
    Fix(
        id=84,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="No predictive send time optimization",
        solution="Use machine learning to determine optimal send times for each individual subscriber based on their engagement patterns.",
        example="Send emails when each subscriber is most likely to open, increasing open rates by 28%",
    ),
    Fix(
        id=85,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced competitive intelligence",
        solution="Implement automated competitive monitoring for pricing, promotions, content, and ad strategies. React quickly to market changes.",
        example="Automatically adjust prices when competitors change theirs, maintaining optimal margin and competitiveness",
    ),
    Fix(
        id=86,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No cross-platform campaign optimization",
        solution="Build unified campaign management across all platforms with shared learnings and budget optimization based on performance.",
        example="Automatically shift budget from Facebook to Google when Google performs better for specific products",
    ),
    Fix(
        id=87,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced inventory management integration",
        solution="Connect inventory levels to marketing campaigns, automatically adjusting ad spend and promotions based on stock levels.",
        example="Reduce ad spend for low-stock items and increase promotion for overstocked products",
    ),
    Fix(
        id=88,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced customer journey mapping",
        solution="Map complete customer journeys with all touchpoints and optimize each interaction for maximum impact on conversion and retention.",
        example="Identify that customers who watch product videos are 3x more likely to purchase within 30 days",
    ),
    Fix(
        id=89,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="No advanced deliverability optimization",
        solution="Implement sophisticated email deliverability monitoring with IP warming, domain reputation management, and engagement-based sending.",
        example="Maintain 98%+ inbox placement rate through advanced reputation management",
    ),
    Fix(
        id=90,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No advanced audience modeling",
        solution="Build custom audience models using first-party data, lookalike modeling, and behavioral prediction algorithms.",
        example="Create 'High-Intent Shoppers' audience with 5x higher conversion rate than standard targeting",
    ),
    Fix(
        id=91,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced conversion rate optimization",
        solution="Implement comprehensive CRO program with heat mapping, user session recording, and advanced statistical testing.",
        example="Systematic CRO program increases conversion rate from 2.1% to 4.7% over 12 months",
    ),
    Fix(
        id=92,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced retention modeling",
        solution="Build predictive models to identify at-risk customers and automatically trigger personalized retention campaigns.",
        example="Reduce churn rate by 35% through predictive retention campaigns triggered by behavior changes",
    ),
    Fix(
        id=93,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="No advanced content optimization",
        solution="Use AI to optimize email content, subject lines, and send times based on individual subscriber preferences and behavior.",
        example="AI-generated subject lines increase open rates by 41% compared to manually written ones",
    ),
    Fix(
        id=94,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No advanced creative testing framework",
        solution="Build systematic creative testing framework with automated performance analysis and creative element optimization.",
        example="Test 500+ creative variations monthly with automated winner identification and scaling",
    ),
    Fix(
        id=95,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced personalization engine",
        solution="Build comprehensive personalization engine that adapts entire website experience based on visitor characteristics and behavior.",
        example="Personalized experiences increase conversion rates by 67% and average order value by 23%",
    ),
    Fix(
        id=96,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced attribution and measurement",
        solution="Implement advanced measurement framework with incrementality testing, media mix modeling, and unified attribution.",
        example="Discover true impact of each channel and optimize budget allocation for 31% better ROAS",
    ),
    Fix(
        id=97,
        difficulty=Difficulty.HARD,
        channel=Channel.EMAIL,
        problem="No advanced lifecycle marketing",
        solution="Build sophisticated lifecycle marketing program with predictive modeling and automated journey optimization.",
        example="Automated lifecycle campaigns generate 45% of total email revenue with minimal manual work",
    ),
    Fix(
        id=98,
        difficulty=Difficulty.HARD,
        channel=Channel.PAID_ADS,
        problem="No advanced bid optimization",
        solution="Implement custom bidding algorithms that consider profit margins, inventory levels, and customer lifetime value.",
        example="Custom bidding increases profit per conversion by 52% while maintaining volume",
    ),
    Fix(
        id=99,
        difficulty=Difficulty.HARD,
        channel=Channel.LANDING_PAGE,
        problem="No advanced mobile optimization",
        solution="Build mobile-first experience with progressive enhancement, AMP pages, and mobile-specific conversion optimization.",
        example="Mobile-optimized experience increases mobile conversion rate from 1.2% to 3.8%",
    ),
    Fix(
        id=100,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced data integration",
        solution="Build unified data platform connecting all marketing tools, customer data, and business systems for complete visibility.",
        example="Unified data platform enables real-time decision making and increases marketing efficiency by 40%",
    ),
    Fix(
        id=101,
        difficulty=Difficulty.HARD,
        channel=Channel.MARKETING,
        problem="No advanced marketing automation",
        solution="Implement enterprise-level marketing automation with AI-driven campaign optimization and cross-channel orchestration.",
        example="Advanced automation increases marketing qualified leads by 78% while reducing manual work by 85%",
    ),
)


FIXES_BY_ID: Dict[int, Fix] = {fix.id: fix for fix in FIXES}


def validate_catalog(fixes: Tuple[Fix, ...] = FIXES) -> None:
    """
    Check the structural invariants of the catalog.

    Raises ValueError if the size, the id range or the per-difficulty
    counts are off.
    """
    if len(fixes) != EXPECTED_TOTAL:
        raise ValueError(f"Catalog must hold {EXPECTED_TOTAL} fixes, found {len(fixes)}")

    ids = [fix.id for fix in fixes]
    if ids != list(range(1, EXPECTED_TOTAL + 1)):
        raise ValueError("Fix ids must be unique, ascending and cover 1..101")

    counts = Counter(fix.difficulty for fix in fixes)
    for difficulty, expected in EXPECTED_DIFFICULTY_COUNTS.items():
        if counts[difficulty] != expected:
            raise ValueError(
                f"Expected {expected} '{difficulty.value}' fixes, found {counts[difficulty]}"
            )


validate_catalog()
