import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.txt')).read()
CHANGES = open(os.path.join(here, 'CHANGES.txt')).read()

requires = [
    'pyramid',
    'pyramid_debugtoolbar',
    'waitress',
    'zope.interface',
    'Markdown>=3.4',
    'pymdown-extensions',
    'nh3',
    ]

setup(name='cynic-board',
      version='0.1',
      description='cynic-board',
      long_description=README + '\n\n' +  CHANGES,
      classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Framework :: Pyramid",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
        ],
      author='Six Feet Up',
      author_email='info@sixfeetup.com',
      url='http://www.sixfeetup.com',
      keywords='web pyramid markdown',
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.8',
      install_requires = requires,
      extras_require={'test': ['mock', 'pytest']},
      entry_points = """\
      [paste.app_factory]
      main = cynic:main
      [console_scripts]
      show_topics = cynic.scripts:show_topics
      show_identities = cynic.scripts:show_identities
      """,
      )
