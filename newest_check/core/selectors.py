NEWEST_URL = "https://news.ycombinator.com/newest"

# One age span per story; its title is "<iso-datetime> <unix-seconds>".
AGE_SEL = "span.age"
AGE_ATTR = "title"
MORE_LINK_SEL = "a.morelink"
