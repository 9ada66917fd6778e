from setuptools import setup
import os

PROJECT_ROOT, _ = os.path.split(os.path.abspath(__file__))
PROJECT_AUTHORS = 'Ken Conley'
PROJECT_EMAILS = ['kwc@willowgarage.com']
REVISION = '0.1.0'
PROJECT_NAME = 'python-jenkins-rest'
PROJECT_URL = 'https://github.com/openstack/python-jenkins'
SHORT_DESCRIPTION = (
  'Python Jenkins REST is a typed job, build, node and queue API over the Jenkins REST '
  'interface, normalizing its redirects, Location headers and error headers into results '
  'and exceptions.'
)

try:
    DESCRIPTION = open(os.path.join(PROJECT_ROOT, 'README.rst')).read()
except IOError:
    DESCRIPTION = SHORT_DESCRIPTION


def read_requirements(name):
    with open(os.path.join(PROJECT_ROOT, name)) as f:
        return [line.strip() for line in f if line.strip()]


setup(
    name=PROJECT_NAME.lower(),
    version=REVISION,
    author=PROJECT_AUTHORS,
    author_email=PROJECT_EMAILS,
    packages=[
        'jenkins_rest'],
    zip_safe=True,
    include_package_data=False,
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('test-requirements.txt'),
    },
    python_requires='>=3.8',
    url=PROJECT_URL,
    description=SHORT_DESCRIPTION,
    long_description=DESCRIPTION,
    license='BSD',
    classifiers=[
        'Topic :: Utilities',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'Environment :: Console',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
