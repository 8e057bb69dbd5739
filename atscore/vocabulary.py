"""Fixed term lists used by keyword extraction, section detection and the ATS check."""

# Ambiguous one- and two-letter names ("R", "Go") are left out: they match ordinary words.
TECH_SKILLS = [
    # Programming languages
    'JavaScript', 'TypeScript', 'Python', 'Java', 'C++', 'C#', 'Golang', 'Rust', 'PHP', 'Ruby',
    'Swift', 'Kotlin', 'Scala', 'MATLAB', 'SQL', 'HTML', 'CSS', 'Dart',

    # Frameworks & libraries
    'React', 'Angular', 'Vue.js', 'Node.js', 'Express', 'Next.js', 'Nuxt.js', 'Django', 'Flask',
    'Spring', 'Spring Boot', 'Laravel', 'Rails', 'ASP.NET', 'Flutter', 'React Native',

    # Databases
    'MySQL', 'PostgreSQL', 'MongoDB', 'Redis', 'SQLite', 'Oracle', 'SQL Server', 'Cassandra',
    'DynamoDB', 'Firebase', 'Supabase',

    # Cloud & DevOps
    'AWS', 'Azure', 'Google Cloud', 'GCP', 'Docker', 'Kubernetes', 'Jenkins', 'GitLab CI',
    'GitHub Actions', 'Terraform', 'Ansible', 'Chef', 'Puppet',

    # Tools & technologies
    'Git', 'Linux', 'Ubuntu', 'Nginx', 'Apache', 'Elasticsearch', 'Kafka', 'RabbitMQ',
    'GraphQL', 'REST API', 'Microservices', 'Serverless',

    # AI/ML
    'TensorFlow', 'PyTorch', 'Scikit-learn', 'Pandas', 'NumPy', 'OpenCV', 'Keras',
    'Machine Learning', 'Data Analysis',

    # Mobile
    'iOS', 'Android', 'Xamarin', 'Cordova', 'Ionic',

    # Blockchain
    'Ethereum', 'Solidity', 'Web3', 'Smart Contracts', 'Blockchain',
]

SOFT_SKILLS = [
    'Leadership', 'Communication', 'Problem Solving', 'Team Work', 'Project Management',
    'Agile', 'Scrum', 'Collaboration', 'Critical Thinking', 'Analytical', 'Creative',
    'Adaptable', 'Detail-oriented', 'Time Management', 'Self-motivated',
]

# Action verbs and credential words that applicant tracking systems look for
ATS_KEYWORDS = [
    'Bachelor', 'Master', 'PhD', 'Degree', 'Certification', 'Experience', 'Years',
    'Developed', 'Built', 'Created', 'Implemented', 'Designed', 'Led', 'Managed',
    'Improved', 'Optimized', 'Increased', 'Reduced', 'Achieved', 'Delivered',
]

STOP_WORDS = frozenset("""
a about above after again against all also am an and any are as at be because been
before being below between both but by can could did do does doing down during each
etc few for from further had has have having he her here hers herself him himself his
how i if in into is it its itself just let me more most must my myself no nor not now
of off on once only or other our ours ourselves out over own per same shall she should
so some such than that the their theirs them themselves then there these they this
those through to too under until up upon us very via was we well were what when where
which while who whom why will with within without would you your yours yourself
yourselves looking join role team work working ability strong plus including able
""".split())
